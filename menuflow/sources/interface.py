from abc import ABC, abstractmethod
from decimal import Decimal


class InputSource(ABC):
    """
    Abstract Base Class interface that defines the contract for anything the
    console can read typed values from (an interactive terminal, a file, a
    prepared string in tests, ...).

    Every read method makes exactly one attempt and reports failure through
    exceptions:
    - MalformedInputError: data is present but does not parse. The offending
      token stays buffered until discard_token() is called.
    - InputExhaustedError: there is no more data.
    - InputUnavailableError: the source has been closed.
    """

    @abstractmethod
    def read_str(self) -> str:
        """Reads the next whitespace-delimited token."""
        pass

    @abstractmethod
    def read_line(self) -> str:
        """Reads the rest of the current line, or the next line if nothing is left on it."""
        pass

    @abstractmethod
    def read_int(self) -> int:
        """Reads the next token as an arbitrary-precision integer."""
        pass

    @abstractmethod
    def read_bool(self) -> bool:
        """Reads the next token as ``true`` or ``false`` (case-insensitive)."""
        pass

    @abstractmethod
    def read_decimal(self) -> Decimal:
        """Reads the next token as a finite arbitrary-precision decimal."""
        pass

    @abstractmethod
    def read_float(self) -> float:
        """Reads the next token as a float."""
        pass

    @abstractmethod
    def discard_token(self) -> None:
        """Drops the buffered token, if any, without reading more data."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Releases the underlying stream."""
        pass
