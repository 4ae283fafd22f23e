import pytest

from twsizes.lengths.css_length import (
    format_percent,
    format_px,
    max_px,
    min_px,
    parse_px_number,
    parse_style_aspect_ratio,
    parse_style_length,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (44, "44px"),
        (44.0, "44px"),
        (71.11111111, "71.111px"),
        (53.3335, "53.334px"),
        (0.5, "0.5px"),
        (0, "0px"),
        (1.2999, "1.3px"),
    ],
)
def test_format_px_rounds_to_three_decimals(value, expected) -> None:
    assert format_px(value) == expected


def test_format_percent_rounds_to_six_decimals() -> None:
    assert format_percent(100 / 3) == "33.333333%"
    assert format_percent(50.0) == "50%"


def test_format_px_round_trips_through_parse() -> None:
    for value in (0, 1, 12.5, 71.111, 1536, 0.001):
        parsed = parse_px_number(format_px(value))
        assert parsed is not None
        assert abs(parsed - value) < 0.001


def test_parse_px_number_accepts_only_plain_px() -> None:
    assert parse_px_number("12px") == 12
    assert parse_px_number("12.5px") == 12.5
    assert parse_px_number("-12px") is None
    assert parse_px_number("12rem") is None
    assert parse_px_number("calc(10px)") is None
    assert parse_px_number(".5px") is None


def test_min_and_max_px_compare_numerically() -> None:
    assert min_px("100px", "40px") == "40px"
    assert max_px("100px", "40px") == "100px"


def test_min_and_max_px_reject_other_units() -> None:
    assert min_px("50%", "320px") is None
    assert max_px("320px", "10vw") is None


def test_parse_style_length_numbers_are_pixels() -> None:
    assert parse_style_length(80) == "80px"
    assert parse_style_length(80.5) == "80.5px"
    assert parse_style_length(-4) is None
    assert parse_style_length(float("nan")) is None
    assert parse_style_length(True) is None


@pytest.mark.parametrize(
    "value",
    ["120px", "2.5rem", "50vw", "100dvh", "10vmin", "calc(100vw - 2rem)", "min(50%, 320px)", "var(--w)"],
)
def test_parse_style_length_accepts_lengths_and_functions(value) -> None:
    assert parse_style_length(value) == value


@pytest.mark.parametrize("value", ["auto", "", "  ", "50%", "fit-content", "12", "12 px", None, object()])
def test_parse_style_length_ignores_other_values(value) -> None:
    assert parse_style_length(value) is None


def test_parse_style_length_trims_whitespace() -> None:
    assert parse_style_length("  120px ") == "120px"


def test_parse_style_aspect_ratio() -> None:
    assert parse_style_aspect_ratio(1.5) == 1.5
    assert parse_style_aspect_ratio("2") == 2
    assert parse_style_aspect_ratio("16 / 9") == pytest.approx(16 / 9)
    assert parse_style_aspect_ratio("4/3") == pytest.approx(4 / 3)


@pytest.mark.parametrize("value", [0, -1, float("inf"), "0", "1/0", "abc", "", "-2", None, False])
def test_parse_style_aspect_ratio_rejects_invalid(value) -> None:
    assert parse_style_aspect_ratio(value) is None


def test_non_finite_values_have_no_px_form() -> None:
    assert format_px(float("inf")) is None
    assert format_px(float("nan")) is None
    assert format_percent(float("-inf")) is None


def test_overflowing_px_literals_are_not_numeric() -> None:
    huge = "1" + "0" * 400 + "px"
    assert parse_px_number(huge) is None
    assert min_px(huge, "40px") is None
    assert max_px("40px", huge) is None
