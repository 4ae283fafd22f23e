"""
twsizes: infer responsive image ``sizes`` values from Tailwind sizing utilities.
"""

from twsizes.breakpoints import DEFAULT_BREAKPOINTS, BreakpointConfig
from twsizes.infer import SIZES_FALLBACK, SizesExplanation, explain_image_sizes, infer_image_sizes
from twsizes.model import SizeInfo

__all__ = [
    "BreakpointConfig",
    "DEFAULT_BREAKPOINTS",
    "SIZES_FALLBACK",
    "SizeInfo",
    "SizesExplanation",
    "explain_image_sizes",
    "infer_image_sizes",
]
