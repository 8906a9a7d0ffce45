from __future__ import annotations

import re

from typing import Any
from typing import Iterator


# Separator used to accumulate several items under a single dest
# ('append', 'append_const' and 'store' with nargs > 1).
APPEND_SEPARATOR = "\n"

_INT_PREFIX = re.compile(r"\s*[+-]?\d+", re.ASCII)
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _repr(self):
    return f"<{self.__class__.__name__} at 0x{id(self):x}: {self}>"


def to_str(value: Any) -> str:
    """Coerce a default/const value to the string form kept in Values."""
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class Value:
    """
    A stored option string with on-demand conversions.

    Conversions never raise: they read the longest numeric prefix of the
    string (after leading whitespace) and fall back to the zero value of
    the requested type when there is none.  "12abc" is 12, "abc" is 0.
    """

    def __init__(self, s: str) -> None:
        self._s = s

    def __str__(self) -> str:
        return self._s

    def __repr__(self) -> str:
        return f"Value({self._s!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return self._s == other._s
        if isinstance(other, str):
            return self._s == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._s)

    def as_string(self) -> str:
        return self._s

    def as_int(self) -> int:
        m = _INT_PREFIX.match(self._s)
        if m is None:
            return 0
        return int(m.group())

    as_long = as_int

    def as_float(self) -> float:
        m = _FLOAT_PREFIX.match(self._s)
        if m is None:
            return 0.0
        return float(m.group())

    def as_complex(self) -> complex:
        try:
            return complex(self._s.strip())
        except ValueError:
            # Not a full complex literal: keep whatever real prefix there is.
            return complex(self.as_float())

    def as_bool(self) -> bool:
        # "1"/"0" is what store_true/store_false write.
        return self.as_int() != 0


class Values:
    """
    Option values produced by one call to OptionParser.parse_args().

    Maps each dest to the string stored for it.  Reading an unset dest
    with ``values[dest]`` gives an empty string; use is_set() to tell the
    two apart.  Note that is_set() is also true for dests that only
    received their default.

    Stored values can also be read as attributes (``values.verbose``), but
    a dest named like one of the methods below (get, all, store, ...)
    is shadowed by the method; ``values[dest]`` always works.
    """

    def __init__(self, defaults: dict[str, str] | None = None) -> None:
        self._map: dict[str, str] = {}
        # dests that received at least one item from append()
        self._appended: set[str] = set()
        if defaults:
            for dest, val in defaults.items():
                self._map[dest] = to_str(val)

    def __str__(self) -> str:
        return str(self._map)

    __repr__ = _repr

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Values):
            return self._map == other._map
        if isinstance(other, dict):
            return self._map == other
        return NotImplemented

    def __getitem__(self, dest: str) -> str:
        return self._map.get(dest, "")

    def __getattr__(self, dest: str) -> str:
        if dest.startswith("_"):
            raise AttributeError(dest)
        try:
            return self._map[dest]
        except KeyError:
            raise AttributeError(f"no value stored for {dest!r}") from None

    def __contains__(self, dest: object) -> bool:
        return dest in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def is_set(self, dest: str) -> bool:
        return dest in self._map

    def get(self, dest: str) -> Value:
        return Value(self[dest])

    def all(self, dest: str) -> list[str]:
        """Return every item accumulated under 'dest', in arrival order."""
        if dest not in self._map:
            return []
        if dest not in self._appended and not self._map[dest]:
            # An empty default holds no items.
            return []
        return self._map[dest].split(APPEND_SEPARATOR)

    def as_dict(self) -> dict[str, str]:
        return dict(self._map)

    # -- Mutation (used by Option.take_action) -------------------------

    def store(self, dest: str, value: str) -> None:
        self._map[dest] = value
        self._appended.discard(dest)

    def append(self, dest: str, value: str) -> None:
        current = self._map.get(dest)
        if dest in self._appended or current:
            self._map[dest] = current + APPEND_SEPARATOR + value
        else:
            self._map[dest] = value
        self._appended.add(dest)
