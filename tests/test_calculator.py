import io
import sys

import pytest

from menuflow.app.main import main
from menuflow.config import Settings
from menuflow.data.calculator import LAST_RESULT, build_calculator, fibonacci
from menuflow.execution.console import Console
from menuflow.sources.adapters.stream_scanner import StreamScanner


def run_calculator(text: str) -> tuple[Console, str]:
    output = io.StringIO()
    console = Console(StreamScanner.from_text(text), output, settings=Settings(GREETING_TEXT=""))
    build_calculator(console)
    console.run()
    return console, output.getvalue()


@pytest.mark.parametrize(
    ("n", "expected"),
    [(0, [0]), (1, [0, 1]), (2, [0, 1, 1]), (7, [0, 1, 1, 2, 3, 5, 8, 13])],
)
def test_fibonacci(n: int, expected: list[int]) -> None:
    assert fibonacci(n) == expected


def test_addition_goes_back_to_menu_then_multiplication_ends() -> None:
    console, text = run_calculator("1\n2 3\n3\n4\n5\n")

    assert console.history == ("menu", "add", "menu", "mul")
    assert "2 + 3 = 5" in text
    assert "4 * 5 = 20" in text
    assert "Last result: 20" in text
    assert "Thanks for using this program!" in text
    assert text.count("Hello please choose an option:") == 2


def test_subtraction_returns_to_menu() -> None:
    console, text = run_calculator("2\n10 4\n3\n1 1\n")

    assert console.history == ("menu", "sub", "menu", "mul")
    assert "10 - 4 = 6" in text
    assert console.store.get(LAST_RESULT, int) == 1


def test_fibonacci_last_value() -> None:
    console, text = run_calculator("4\n0\n1\n10\n")

    assert console.history == ("menu", "fibo", "fibo_last")
    assert "Please enter a number of at least 2." in text
    assert "Fibonacci(10) = 55" in text
    assert "Last result: 55" in text


def test_fibonacci_all_steps() -> None:
    _, text = run_calculator("4\n1\n4\n")

    for line in ["Fibonacci(0) = 0", "Fibonacci(2) = 1", "Fibonacci(4) = 3"]:
        assert line in text
    assert "Last result: 3" in text


def test_invalid_menu_choice_is_asked_again() -> None:
    console, text = run_calculator("0\nfive\n3\n2\n2\n")

    assert console.history == ("menu", "mul")
    assert text.count("Please enter a number between 1 and 4.") == 1
    assert "2 * 2 = 4" in text


def test_closed_input_stops_early_and_still_says_goodbye() -> None:
    console, text = run_calculator("1\n2\n")

    assert console.history == ("menu", "add")
    assert "Input closed, stopping early." in text
    assert "Last result" not in text
    assert text.index("Input closed") < text.index("Thanks for using this program!")


def test_main_runs_demo_on_standard_streams(monkeypatch, capsys) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n6 7\n"))

    assert main(["--no-greeting"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Hello please choose an option:\n1. Addition\n")
    assert "6 * 7 = 42" in out
    assert "Welcome" not in out
