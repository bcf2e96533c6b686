"""Builders for hash commands."""

from __future__ import annotations

from typing import Any

from .cmd import Cmd, NumericBehavior, cmd, describe_numeric_behavior, is_single_arg


def hget(key: Any, field: Any) -> Cmd:
    """HGET a single field, or HMGET when ``field`` holds several fields."""
    return cmd("HGET" if is_single_arg(field) else "HMGET").arg(key).arg(field)


def hdel(key: Any, field: Any) -> Cmd:
    """HDEL one or more fields from a hash."""
    return cmd("HDEL").arg(key).arg(field)


def hset(key: Any, field: Any, value: Any) -> Cmd:
    """HSET a single field in a hash."""
    return cmd("HSET").arg(key).arg(field).arg(value)


def hset_nx(key: Any, field: Any, value: Any) -> Cmd:
    """HSETNX: set a field only if it does not exist."""
    return cmd("HSETNX").arg(key).arg(field).arg(value)


def hset_multiple(key: Any, items: Any) -> Cmd:
    """HMSET several ``(field, value)`` pairs."""
    return cmd("HMSET").arg(key).arg(items)


def hincr(key: Any, field: Any, delta: Any) -> Cmd:
    """HINCRBY, or HINCRBYFLOAT when ``delta`` is a float."""
    is_float = describe_numeric_behavior(delta) is NumericBehavior.NUMBER_IS_FLOAT
    return (
        cmd("HINCRBYFLOAT" if is_float else "HINCRBY")
        .arg(key)
        .arg(field)
        .arg(delta)
    )


def hexists(key: Any, field: Any) -> Cmd:
    """HEXISTS: test whether a field exists."""
    return cmd("HEXISTS").arg(key).arg(field)


def hkeys(key: Any) -> Cmd:
    """HKEYS: all field names of a hash."""
    return cmd("HKEYS").arg(key)


def hvals(key: Any) -> Cmd:
    """HVALS: all values of a hash."""
    return cmd("HVALS").arg(key)


def hgetall(key: Any) -> Cmd:
    """HGETALL: all fields and values of a hash."""
    return cmd("HGETALL").arg(key)


def hlen(key: Any) -> Cmd:
    """HLEN: number of fields in a hash."""
    return cmd("HLEN").arg(key)


def hscan(key: Any) -> Cmd:
    """HSCAN a hash from cursor 0."""
    return cmd("HSCAN").arg(key).cursor_arg(0)


def hscan_match(key: Any, pattern: Any) -> Cmd:
    """HSCAN a hash for fields matching ``pattern``."""
    return cmd("HSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern)