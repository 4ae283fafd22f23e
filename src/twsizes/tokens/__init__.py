from twsizes.tokens.class_names import MAX_NESTING_DEPTH, join_class_names, split_class_tokens
from twsizes.tokens.variants import get_breakpoint, parse_variant_token

__all__ = [
    "MAX_NESTING_DEPTH",
    "get_breakpoint",
    "join_class_names",
    "parse_variant_token",
    "split_class_tokens",
]
