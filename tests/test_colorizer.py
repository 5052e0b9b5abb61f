import pytest

from menuflow.formatting.colorizer import RESET, Bg, Effect, Fg, bg_rgb, colorize, fg_indexed, fg_rgb


def test_combines_attributes_into_one_sequence() -> None:
    assert colorize("hi", Effect.BOLD, Fg.RED) == "\033[1;31mhi\033[0m"


def test_without_attributes_text_is_unchanged() -> None:
    assert colorize("plain") == "plain"
    assert colorize("plain", Effect.NONE) == "plain"


def test_none_effect_is_skipped_among_others() -> None:
    assert colorize("x", Effect.NONE, Bg.BLUE) == "\033[44mx\033[0m"


def test_style_is_reset_around_line_breaks() -> None:
    assert colorize("a\nb", Fg.GREEN) == f"\033[32ma{RESET}\n\033[32mb{RESET}"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (fg_rgb(10, 20, 30), "38;2;10;20;30"),
        (fg_rgb(-5, 300, 128), "38;2;0;255;128"),
        (bg_rgb(255, 0, 0), "48;2;255;0;0"),
        (fg_indexed(999), "38;5;255"),
    ],
)
def test_extended_color_codes(code: str, expected: str) -> None:
    assert code == expected


def test_extended_codes_mix_with_enums() -> None:
    assert colorize("z", Effect.UNDERLINE, fg_indexed(208)) == "\033[4;38;5;208mz\033[0m"
