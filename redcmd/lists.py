"""Builders for list commands."""

from __future__ import annotations

from typing import Any

from .cmd import Cmd, cmd
from .options import Direction, LposOptions


def _non_negative(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer")
    return value


def _integer(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer")
    return value


def _direction(value: Direction, what: str) -> Direction:
    if not isinstance(value, Direction):
        raise TypeError(f"{what} must be a Direction")
    return value


def _optional_positive(count: int | None) -> int | None:
    if count is None:
        return None
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise ValueError("count must be a positive integer or None")
    return count


def blmove(
    srckey: Any, dstkey: Any, src_dir: Direction, dst_dir: Direction, timeout: int
) -> Cmd:
    """BLMOVE: move an element between lists, blocking until one is available."""
    return (
        cmd("BLMOVE")
        .arg(srckey)
        .arg(dstkey)
        .arg(_direction(src_dir, "src_dir"))
        .arg(_direction(dst_dir, "dst_dir"))
        .arg(_non_negative(timeout, "timeout"))
    )


def blmpop(
    timeout: int, numkeys: int, key: Any, direction: Direction, count: int
) -> Cmd:
    """BLMPOP: pop ``count`` elements from the first non-empty list, blocking."""
    return (
        cmd("BLMPOP")
        .arg(_non_negative(timeout, "timeout"))
        .arg(_non_negative(numkeys, "numkeys"))
        .arg(key)
        .arg(_direction(direction, "direction"))
        .arg("COUNT")
        .arg(_non_negative(count, "count"))
    )


def blpop(key: Any, timeout: int) -> Cmd:
    """BLPOP: pop the first element, blocking until one is available."""
    return cmd("BLPOP").arg(key).arg(_non_negative(timeout, "timeout"))


def brpop(key: Any, timeout: int) -> Cmd:
    """BRPOP: pop the last element, blocking until one is available."""
    return cmd("BRPOP").arg(key).arg(_non_negative(timeout, "timeout"))


def brpoplpush(srckey: Any, dstkey: Any, timeout: int) -> Cmd:
    """BRPOPLPUSH: pop from one list and push to another, blocking."""
    return (
        cmd("BRPOPLPUSH")
        .arg(srckey)
        .arg(dstkey)
        .arg(_non_negative(timeout, "timeout"))
    )


def lindex(key: Any, index: int) -> Cmd:
    """LINDEX: the element at ``index``."""
    return cmd("LINDEX").arg(key).arg(_integer(index, "index"))


def linsert_before(key: Any, pivot: Any, value: Any) -> Cmd:
    """LINSERT BEFORE: insert ``value`` before ``pivot``."""
    return cmd("LINSERT").arg(key).arg("BEFORE").arg(pivot).arg(value)


def linsert_after(key: Any, pivot: Any, value: Any) -> Cmd:
    """LINSERT AFTER: insert ``value`` after ``pivot``."""
    return cmd("LINSERT").arg(key).arg("AFTER").arg(pivot).arg(value)


def llen(key: Any) -> Cmd:
    """LLEN: the length of a list."""
    return cmd("LLEN").arg(key)


def lmove(srckey: Any, dstkey: Any, src_dir: Direction, dst_dir: Direction) -> Cmd:
    """LMOVE: move an element from one list to another."""
    return (
        cmd("LMOVE")
        .arg(srckey)
        .arg(dstkey)
        .arg(_direction(src_dir, "src_dir"))
        .arg(_direction(dst_dir, "dst_dir"))
    )


def lmpop(numkeys: int, key: Any, direction: Direction, count: int) -> Cmd:
    """LMPOP: pop ``count`` elements from the first non-empty list."""
    return (
        cmd("LMPOP")
        .arg(_non_negative(numkeys, "numkeys"))
        .arg(key)
        .arg(_direction(direction, "direction"))
        .arg("COUNT")
        .arg(_non_negative(count, "count"))
    )


def lpop(key: Any, count: int | None = None) -> Cmd:
    """LPOP up to ``count`` elements; only the first one when ``count`` is None."""
    return cmd("LPOP").arg(key).arg(_optional_positive(count))


def lpos(key: Any, value: Any, options: LposOptions) -> Cmd:
    """LPOS: the index of matching elements."""
    if not isinstance(options, LposOptions):
        raise TypeError("options must be LposOptions")
    return cmd("LPOS").arg(key).arg(value).arg(options)


def lpush(key: Any, value: Any) -> Cmd:
    """LPUSH values at the head of a list."""
    return cmd("LPUSH").arg(key).arg(value)


def lpush_exists(key: Any, value: Any) -> Cmd:
    """LPUSHX: push at the head only if the list exists."""
    return cmd("LPUSHX").arg(key).arg(value)


def lrange(key: Any, start: int, stop: int) -> Cmd:
    """LRANGE: elements between ``start`` and ``stop``."""
    return (
        cmd("LRANGE")
        .arg(key)
        .arg(_integer(start, "start"))
        .arg(_integer(stop, "stop"))
    )


def lrem(key: Any, count: int, value: Any) -> Cmd:
    """LREM: remove ``count`` occurrences of ``value``."""
    return cmd("LREM").arg(key).arg(_integer(count, "count")).arg(value)


def ltrim(key: Any, start: int, stop: int) -> Cmd:
    """LTRIM a list to the given range."""
    return (
        cmd("LTRIM")
        .arg(key)
        .arg(_integer(start, "start"))
        .arg(_integer(stop, "stop"))
    )


def lset(key: Any, index: int, value: Any) -> Cmd:
    """LSET the element at ``index``."""
    return cmd("LSET").arg(key).arg(_integer(index, "index")).arg(value)


def rpop(key: Any, count: int | None = None) -> Cmd:
    """RPOP up to ``count`` elements; only the last one when ``count`` is None."""
    return cmd("RPOP").arg(key).arg(_optional_positive(count))


def rpoplpush(key: Any, dstkey: Any) -> Cmd:
    """RPOPLPUSH: pop from one list and push to another."""
    return cmd("RPOPLPUSH").arg(key).arg(dstkey)


def rpush(key: Any, value: Any) -> Cmd:
    """RPUSH values at the tail of a list."""
    return cmd("RPUSH").arg(key).arg(value)


def rpush_exists(key: Any, value: Any) -> Cmd:
    """RPUSHX: push at the tail only if the list exists."""
    return cmd("RPUSHX").arg(key).arg(value)