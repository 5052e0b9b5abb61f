import io
import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, TextIO, TypeVar

from ..interface import InputSource
from ...services.exceptions import (
    InputExhaustedError,
    InputUnavailableError,
    MalformedInputError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TOKEN = re.compile(r"\S+")
# ASCII digits only: no "1_000", no non-Latin numerals, no NaN/Infinity
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_BOOLEANS = {"true": True, "false": False}


class StreamScanner(InputSource):
    """
    Token scanner over any text stream (sys.stdin, an open file, io.StringIO).

    Lines are pulled from the stream lazily, one at a time, so an interactive
    terminal only blocks when a value is actually needed. Tokens left on the
    current line are served before a new line is read.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        # Unconsumed remainder of the current line; None before the first read
        self._line: Optional[str] = None
        self._closed = False

    @classmethod
    def from_text(cls, text: str) -> "StreamScanner":
        return cls(io.StringIO(text))

    # ==========================================================================
    # InputSource
    # ==========================================================================

    def read_str(self) -> str:
        token = self._peek_token()
        self._consume(token)
        return token

    def read_line(self) -> str:
        if self._line is not None:
            rest = self._line.rstrip("\r\n").lstrip()
            self._line = None
            if rest:
                return rest
        line = self._read_raw_line()
        return line.rstrip("\r\n")

    def read_int(self) -> int:
        def to_int(token: str) -> int:
            if not _INTEGER.fullmatch(token):
                raise ValueError(token)
            return int(token)

        return self._parse("an integer", to_int)

    def read_bool(self) -> bool:
        def to_bool(token: str) -> bool:
            return _BOOLEANS[token.lower()]

        return self._parse("a boolean", to_bool)

    def read_decimal(self) -> Decimal:
        def to_decimal(token: str) -> Decimal:
            if not _DECIMAL.fullmatch(token):
                raise ValueError(token)
            return Decimal(token)

        return self._parse("a decimal number", to_decimal)

    def read_float(self) -> float:
        return self._parse("a number", float)

    def discard_token(self) -> None:
        if self._line is None:
            return
        remainder = self._line.lstrip()
        match = _TOKEN.match(remainder)
        if match:
            logger.debug(f"Discarding token {match.group()!r}")
            self._line = remainder[match.end():]

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._line = None
            self._stream.close()

    # ==========================================================================
    # Helpers
    # ==========================================================================

    def _parse(self, expected: str, convert: Callable[[str], T]) -> T:
        token = self._peek_token()
        try:
            value = convert(token)
        except (ValueError, KeyError, InvalidOperation):
            # The token stays buffered; the caller decides whether to discard it.
            raise MalformedInputError(token, expected) from None
        self._consume(token)
        return value

    def _peek_token(self) -> str:
        while True:
            if self._line is not None:
                remainder = self._line.lstrip()
                match = _TOKEN.match(remainder)
                if match:
                    self._line = remainder
                    return match.group()
            self._line = self._read_raw_line()

    def _consume(self, token: str) -> None:
        self._line = self._line[len(token):]

    def _read_raw_line(self) -> str:
        if self._closed:
            raise InputUnavailableError("Input source is closed.")
        line = self._stream.readline()
        if line == "":
            logger.debug("Input stream exhausted")
            raise InputExhaustedError("No more input is available.")
        return line
