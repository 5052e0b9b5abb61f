import io
from decimal import Decimal

import pytest

from menuflow.services.exceptions import InputExhaustedError, InputUnavailableError, MalformedInputError
from menuflow.sources.adapters.stream_scanner import StreamScanner


def test_tokens_are_read_across_lines() -> None:
    scanner = StreamScanner.from_text("  12 hello\n\n   true 3.5\n1.25\n")
    assert scanner.read_int() == 12
    assert scanner.read_str() == "hello"
    assert scanner.read_bool() is True
    assert scanner.read_float() == 3.5
    assert scanner.read_decimal() == Decimal("1.25")


@pytest.mark.parametrize(("token", "expected"), [("TRUE", True), ("False", False), ("true", True)])
def test_booleans_ignore_case(token: str, expected: bool) -> None:
    assert StreamScanner.from_text(token).read_bool() is expected


def test_malformed_token_stays_buffered() -> None:
    scanner = StreamScanner.from_text("abc 5\n")
    with pytest.raises(MalformedInputError) as excinfo:
        scanner.read_int()
    assert excinfo.value.token == "abc"
    assert scanner.read_str() == "abc"
    assert scanner.read_int() == 5


def test_discard_token_drops_only_the_current_token() -> None:
    scanner = StreamScanner.from_text("abc 5\n6\n")
    with pytest.raises(MalformedInputError):
        scanner.read_int()
    scanner.discard_token()
    assert scanner.read_int() == 5
    assert scanner.read_int() == 6


def test_discard_token_before_any_read_is_a_no_op() -> None:
    scanner = StreamScanner.from_text("7\n")
    scanner.discard_token()
    assert scanner.read_int() == 7


@pytest.mark.parametrize("token", ["1_000", "١٢", "+", "1.0", "0x10"])
def test_integers_must_be_ascii_digits(token: str) -> None:
    scanner = StreamScanner.from_text(f"{token} 7\n")
    with pytest.raises(MalformedInputError):
        scanner.read_int()
    scanner.discard_token()
    assert scanner.read_int() == 7


@pytest.mark.parametrize(("token", "expected"), [("-12", -12), ("+3", 3), ("007", 7)])
def test_signed_integers_are_accepted(token: str, expected: int) -> None:
    assert StreamScanner.from_text(token).read_int() == expected


@pytest.mark.parametrize(("token", "expected"), [("2.", "2"), (".5", "0.5"), ("-1.5e3", "-1500")])
def test_decimal_forms_are_accepted(token: str, expected: str) -> None:
    assert StreamScanner.from_text(token).read_decimal() == Decimal(expected)


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-inf", "1,5", "1_0.5", "٣.٥"])
def test_non_finite_or_malformed_decimals_are_rejected(token: str) -> None:
    with pytest.raises(MalformedInputError):
        StreamScanner.from_text(token).read_decimal()


def test_read_line_returns_rest_of_current_line() -> None:
    scanner = StreamScanner.from_text("3 the rest here\nnext line\n")
    assert scanner.read_int() == 3
    assert scanner.read_line() == "the rest here"
    assert scanner.read_line() == "next line"


def test_read_line_skips_an_empty_remainder() -> None:
    scanner = StreamScanner.from_text("3\nfull line\r\n")
    assert scanner.read_int() == 3
    assert scanner.read_line() == "full line"


def test_exhausted_stream_raises() -> None:
    scanner = StreamScanner.from_text("1\n   \n")
    assert scanner.read_int() == 1
    with pytest.raises(InputExhaustedError):
        scanner.read_str()


def test_closed_scanner_is_unavailable_and_closes_its_stream() -> None:
    stream = io.StringIO("1\n")
    scanner = StreamScanner(stream)
    scanner.close()
    scanner.close()
    assert stream.closed
    with pytest.raises(InputUnavailableError):
        scanner.read_int()
