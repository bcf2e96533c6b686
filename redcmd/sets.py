"""Builders for set and HyperLogLog commands."""

from __future__ import annotations

from typing import Any

from .cmd import Cmd, cmd


def _non_negative(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer")
    return value


def sadd(key: Any, member: Any) -> Cmd:
    """SADD one or more members to a set."""
    return cmd("SADD").arg(key).arg(member)


def scard(key: Any) -> Cmd:
    """SCARD: the number of members in a set."""
    return cmd("SCARD").arg(key)


def sdiff(keys: Any) -> Cmd:
    """SDIFF: subtract multiple sets."""
    return cmd("SDIFF").arg(keys)


def sdiffstore(dstkey: Any, keys: Any) -> Cmd:
    """SDIFFSTORE: subtract multiple sets and store the result in ``dstkey``."""
    return cmd("SDIFFSTORE").arg(dstkey).arg(keys)


def sinter(keys: Any) -> Cmd:
    """SINTER: intersect multiple sets."""
    return cmd("SINTER").arg(keys)


def sinterstore(dstkey: Any, keys: Any) -> Cmd:
    """SINTERSTORE: intersect multiple sets and store the result in ``dstkey``."""
    return cmd("SINTERSTORE").arg(dstkey).arg(keys)


def sismember(key: Any, member: Any) -> Cmd:
    """SISMEMBER: test whether ``member`` belongs to a set."""
    return cmd("SISMEMBER").arg(key).arg(member)


def smembers(key: Any) -> Cmd:
    """SMEMBERS: all members of a set."""
    return cmd("SMEMBERS").arg(key)


def smove(srckey: Any, dstkey: Any, member: Any) -> Cmd:
    """SMOVE a member from one set to another."""
    return cmd("SMOVE").arg(srckey).arg(dstkey).arg(member)


def spop(key: Any) -> Cmd:
    """SPOP: remove and return a random member."""
    return cmd("SPOP").arg(key)


def srandmember(key: Any) -> Cmd:
    """SRANDMEMBER: one random member."""
    return cmd("SRANDMEMBER").arg(key)


def srandmember_multiple(key: Any, count: int) -> Cmd:
    """SRANDMEMBER with a count: several random members."""
    return cmd("SRANDMEMBER").arg(key).arg(_non_negative(count, "count"))


def srem(key: Any, member: Any) -> Cmd:
    """SREM one or more members from a set."""
    return cmd("SREM").arg(key).arg(member)


def sunion(keys: Any) -> Cmd:
    """SUNION: add multiple sets."""
    return cmd("SUNION").arg(keys)


def sunionstore(dstkey: Any, keys: Any) -> Cmd:
    """SUNIONSTORE: add multiple sets and store the result in ``dstkey``."""
    return cmd("SUNIONSTORE").arg(dstkey).arg(keys)


def sscan(key: Any) -> Cmd:
    """SSCAN a set from cursor 0."""
    return cmd("SSCAN").arg(key).cursor_arg(0)


def sscan_match(key: Any, pattern: Any) -> Cmd:
    """SSCAN a set for members matching ``pattern``."""
    return cmd("SSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern)


def pfadd(key: Any, element: Any) -> Cmd:
    """PFADD elements to a HyperLogLog."""
    return cmd("PFADD").arg(key).arg(element)


def pfcount(key: Any) -> Cmd:
    """PFCOUNT: approximated cardinality of one or more HyperLogLogs."""
    return cmd("PFCOUNT").arg(key)


def pfmerge(dstkey: Any, srckeys: Any) -> Cmd:
    """PFMERGE several HyperLogLogs into ``dstkey``."""
    return cmd("PFMERGE").arg(dstkey).arg(srckeys)