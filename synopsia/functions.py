"""Function entries for the function search feature."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = ["FUNC_BADADDR", "FunctionInfo", "FunctionList"]

#: Marker for "no function address".
FUNC_BADADDR = (1 << 64) - 1


@dataclass(frozen=True)
class FunctionInfo:
    """A function's address, name and demangled name."""

    address: int
    name: str = ""
    demangled_name: str = ""

    def has_demangled(self) -> bool:
        """Whether a demangled name exists and differs from the plain name."""
        return bool(self.demangled_name) and self.demangled_name != self.name


_MISSING = FunctionInfo(FUNC_BADADDR, "", "")


class FunctionList:
    """An ordered list of functions with bounds-safe lookup by index."""

    def __init__(self, functions: Iterable[FunctionInfo] = ()) -> None:
        self._functions = list(functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[FunctionInfo]:
        return iter(self._functions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._functions!r})"

    def get_function(self, index: int) -> FunctionInfo:
        """The function at ``index``, or one at FUNC_BADADDR with empty names."""
        if not 0 <= index < len(self._functions):
            return _MISSING
        return self._functions[index]