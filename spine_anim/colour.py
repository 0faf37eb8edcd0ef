"""Colour parsing and the typed field readers used when loading skeleton data."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

_T = TypeVar("_T")

DEFAULT_COLOUR = 0xFFFFFFFF

_U32_MAX = 0xFFFFFFFF
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_REQUIRED: Any = object()


def parse_colour(text: str) -> int:
    """Parse a hexadecimal colour string into a 32-bit value.

    A six-character colour is shifted left by two bits and given a full
    low byte; any other length is taken as the value it spells.
    """
    if not isinstance(text, str):
        raise ValueError(f"colour must be a string, got {type(text).__name__}")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"invalid hexadecimal colour {text!r}")
    value = int(digits, 16)
    if value > _U32_MAX:
        raise ValueError(f"colour {text!r} does not fit in 32 bits")
    if len(text) == 6:
        value = (value << 2) | 0xFF
    return value


def _to_float(raw: Any) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"expected a number, got {raw!r}")
    return float(raw)


def _to_int(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
        raise ValueError(f"expected a non-negative integer, got {raw!r}")
    return raw


def _to_u32(raw: Any) -> int:
    value = _to_int(raw)
    if value > _U32_MAX:
        raise ValueError(f"{value} does not fit in 32 bits")
    return value


def _to_bool(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise ValueError(f"expected a boolean, got {raw!r}")
    return raw


def _to_str(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueError(f"expected a string, got {raw!r}")
    return raw


def _optional(convert: Callable[[Any], _T]) -> Callable[[Any], _T | None]:
    def read(raw: Any) -> _T | None:
        return None if raw is None else convert(raw)

    return read


def _list_of(convert: Callable[[Any], _T]) -> Callable[[Any], list[_T]]:
    def read(raw: Any) -> list[_T]:
        if not isinstance(raw, list):
            raise ValueError(f"expected a list, got {type(raw).__name__}")
        return [convert(item) for item in raw]

    return read


def _map_of(convert: Callable[[Any], _T]) -> Callable[[Any], dict[str, _T]]:
    def read(raw: Any) -> dict[str, _T]:
        if not isinstance(raw, Mapping):
            raise ValueError(f"expected an object, got {type(raw).__name__}")
        return {_to_str(key): convert(value) for key, value in raw.items()}

    return read


class _Fields:
    """Typed access to the keys of one JSON object."""

    def __init__(self, data: Any, owner: str) -> None:
        if not isinstance(data, Mapping):
            raise ValueError(f"{owner}: expected an object, got {type(data).__name__}")
        self._data = data
        self._owner = owner

    def get(
        self,
        name: str,
        convert: Callable[[Any], _T],
        *,
        default: Any = _REQUIRED,
        factory: Callable[[], Any] | None = None,
        aliases: tuple[str, ...] = (),
    ) -> Any:
        for key in (name, *aliases):
            if key in self._data:
                try:
                    return convert(self._data[key])
                except ValueError as exc:
                    raise ValueError(f"{self._owner}.{name}: {exc}") from exc
        if factory is not None:
            return factory()
        if default is _REQUIRED:
            raise ValueError(f"{self._owner}: missing field '{name}'")
        return default