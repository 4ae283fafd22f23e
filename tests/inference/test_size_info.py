from twsizes.breakpoints import DEFAULT_BREAKPOINTS
from twsizes.inference_log import InferenceLog
from twsizes.model import SizeInfo
from twsizes.size_info import merge_style_into_size_info, parse_size_info_by_breakpoint


def _parse(class_name, **kwargs):
    return parse_size_info_by_breakpoint(class_name, 4, DEFAULT_BREAKPOINTS, kwargs.get("custom") or {})


def test_size_sets_width_and_height() -> None:
    result = _parse("size-11")
    assert result.base == SizeInfo(width="44px", height="44px")
    assert result.breakpoints == {}


def test_each_utility_sets_its_field() -> None:
    result = _parse("w-10 min-w-5 max-w-20 h-4 min-h-2 max-h-8")
    assert result.base == SizeInfo(
        width="40px",
        min_width="20px",
        max_width="80px",
        height="16px",
        min_height="8px",
        max_height="32px",
    )


def test_max_w_is_not_mistaken_for_w() -> None:
    result = _parse("max-w-50")
    assert result.base == SizeInfo(max_width="200px")


def test_breakpoint_tokens_go_to_their_bucket() -> None:
    result = _parse("size-25 lg:size-30 hover:w-2 md:hover:h-3")
    assert result.base == SizeInfo(width="8px", height="100px")
    assert result.breakpoints["lg"] == SizeInfo(width="120px", height="120px")
    assert result.breakpoints["md"] == SizeInfo(height="12px")


def test_last_token_wins() -> None:
    assert _parse("w-10 w-20").base == SizeInfo(width="80px")
    assert _parse("w-10 h-5 size-2").base == SizeInfo(width="8px", height="8px")
    assert _parse("size-2 w-10").base == SizeInfo(width="40px", height="8px")


def test_size_matches_separate_width_and_height() -> None:
    assert _parse("size-7").base == _parse("w-7 h-7").base


def test_unresolvable_values_leave_fields_untouched() -> None:
    result = _parse("w-10 w-full lg:w-auto")
    assert result.base == SizeInfo(width="40px")
    assert "lg" not in result.breakpoints


def test_unknown_tokens_are_ignored() -> None:
    result = _parse("flex rounded-lg object-cover aspect-video")
    assert result.base is None
    assert result.breakpoints == {}


def test_rejected_values_are_logged() -> None:
    log = InferenceLog()
    parse_size_info_by_breakpoint("w-full w-4", 4, DEFAULT_BREAKPOINTS, {}, log=log)
    messages = log.messages()
    assert messages == ["sizing value rejected", "sizing token applied"]


def test_style_overrides_class_values() -> None:
    info = SizeInfo(width="44px", height="44px", max_width="100px")
    merge_style_into_size_info(info, {"width": 80, "maxHeight": "50vh", "height": "auto"})
    assert info == SizeInfo(width="80px", height="44px", max_width="100px", max_height="50vh")


def test_style_accepts_snake_case_and_min_keys() -> None:
    info = SizeInfo()
    merge_style_into_size_info(info, {"min_width": "10rem", "minHeight": 20, "max_width": "calc(100% - 1rem)"})
    assert info == SizeInfo(min_width="10rem", min_height="20px", max_width="calc(100% - 1rem)")


def test_style_ignores_invalid_values() -> None:
    info = SizeInfo(width="40px")
    merge_style_into_size_info(info, {"width": "fit-content", "height": ""})
    assert info == SizeInfo(width="40px")
    assert merge_style_into_size_info(info, None) is info
