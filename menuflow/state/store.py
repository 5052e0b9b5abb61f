from typing import Any, Dict, Type, TypeVar

from ..services.exceptions import NotFoundError, TypeMismatchError

T = TypeVar("T")


class ObjectStore:
    """
    Typed key-value store for passing data between actions.

    Wraps the session's slot dictionary so that everything an action stores
    lives and dies with its console.
    """

    def __init__(self, slots: Dict[str, Any]):
        self._slots = slots

    def store(self, key: str, value: Any) -> None:
        self._slots[key] = value

    def get(self, key: str, expected_type: Type[T] = object) -> T:
        if key not in self._slots:
            raise NotFoundError(f"No object stored under '{key}'.")
        value = self._slots[key]
        if not isinstance(value, expected_type):
            raise TypeMismatchError(
                f"Object '{key}' is {type(value).__name__}, expected {expected_type.__name__}."
            )
        return value

    def remove(self, key: str) -> None:
        self._slots.pop(key, None)

    def clear_all(self) -> None:
        self._slots.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __len__(self) -> int:
        return len(self._slots)
