"""Option types shared by several commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class Direction(enum.Enum):
    """LEFT or RIGHT end of a list."""

    LEFT = b"LEFT"
    RIGHT = b"RIGHT"

    def to_redis_args(self) -> list[bytes]:
        return [self.value]


def _check_non_negative(n: int, what: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"{what} must be a non-negative integer")


@dataclass(frozen=True)
class LposOptions:
    """Options for the LPOS command; each setter returns a new instance."""

    _count: int | None = None
    _rank: int | None = None
    _maxlen: int | None = None

    def count(self, n: int) -> LposOptions:
        """Limit the results to the first ``n`` matching items."""
        _check_non_negative(n, "count")
        return replace(self, _count=n)

    def rank(self, n: int) -> LposOptions:
        """Return the ``n``-th match."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError("rank must be an integer")
        return replace(self, _rank=n)

    def maxlen(self, n: int) -> LposOptions:
        """Limit the search to ``n`` items of the list."""
        _check_non_negative(n, "maxlen")
        return replace(self, _maxlen=n)

    def to_redis_args(self) -> list[bytes]:
        out: list[bytes] = []
        for label, value in (
            (b"COUNT", self._count),
            (b"RANK", self._rank),
            (b"MAXLEN", self._maxlen),
        ):
            if value is not None:
                out += [label, str(value).encode("ascii")]
        return out

    def is_single_arg(self) -> bool:
        return False


class ExpiryKind(enum.Enum):
    """Expiration modes for GETEX."""

    EX = "EX"
    PX = "PX"
    EXAT = "EXAT"
    PXAT = "PXAT"
    PERSIST = "PERSIST"


@dataclass(frozen=True)
class Expiry:
    """An expiration setting: a kind and, except for PERSIST, a time value."""

    kind: ExpiryKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind is ExpiryKind.PERSIST:
            if self.value is not None:
                raise ValueError("PERSIST takes no time value")
        else:
            _check_non_negative(self.value, f"{self.kind.value} time")

    def to_redis_args(self) -> list[bytes]:
        out = [self.kind.value.encode("ascii")]
        if self.value is not None:
            out.append(str(self.value).encode("ascii"))
        return out

    def is_single_arg(self) -> bool:
        return False