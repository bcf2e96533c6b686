"""Builders for key, string, bit, object and pub/sub commands."""

from __future__ import annotations

import warnings
from typing import Any

from .cmd import Cmd, NumericBehavior, cmd, describe_numeric_behavior, is_single_arg
from .options import Expiry


def _non_negative(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{what} must be a non-negative integer")
    return value


def _integer(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer")
    return value


def get(key: Any) -> Cmd:
    """GET a key, or MGET when ``key`` holds several keys."""
    return cmd("GET" if is_single_arg(key) else "MGET").arg(key)


def mget(key: Any) -> Cmd:
    """MGET the values of keys."""
    return cmd("MGET").arg(key)


def keys(key: Any) -> Cmd:
    """KEYS matching a pattern."""
    return cmd("KEYS").arg(key)


def set(key: Any, value: Any) -> Cmd:  # noqa: A001 - mirrors the command name
    """SET the string value of a key."""
    return cmd("SET").arg(key).arg(value)


def set_multiple(items: Any) -> Cmd:
    """MSET several keys; deprecated in favour of :func:`mset`."""
    warnings.warn(
        "set_multiple() is renamed to mset()", DeprecationWarning, stacklevel=2
    )
    return mset(items)


def mset(items: Any) -> Cmd:
    """MSET several ``(key, value)`` pairs."""
    return cmd("MSET").arg(items)


def set_ex(key: Any, value: Any, seconds: int) -> Cmd:
    """SETEX: set a value with an expiry in seconds."""
    return cmd("SETEX").arg(key).arg(_non_negative(seconds, "seconds")).arg(value)


def pset_ex(key: Any, value: Any, milliseconds: int) -> Cmd:
    """PSETEX: set a value with an expiry in milliseconds."""
    return (
        cmd("PSETEX")
        .arg(key)
        .arg(_non_negative(milliseconds, "milliseconds"))
        .arg(value)
    )


def set_nx(key: Any, value: Any) -> Cmd:
    """SETNX: set a value only if the key does not exist."""
    return cmd("SETNX").arg(key).arg(value)


def mset_nx(items: Any) -> Cmd:
    """MSETNX: set several keys unless any already exists."""
    return cmd("MSETNX").arg(items)


def getset(key: Any, value: Any) -> Cmd:
    """GETSET: set a value and return the old one."""
    return cmd("GETSET").arg(key).arg(value)


def getrange(key: Any, start: int, end: int) -> Cmd:
    """GETRANGE: a substring of the value; negative offsets count from the end."""
    return cmd("GETRANGE").arg(key).arg(_integer(start, "start")).arg(_integer(end, "end"))


def setrange(key: Any, offset: int, value: Any) -> Cmd:
    """SETRANGE: overwrite part of the value at ``offset``."""
    return cmd("SETRANGE").arg(key).arg(_integer(offset, "offset")).arg(value)


def delete(key: Any) -> Cmd:
    """DEL one or more keys."""
    return cmd("DEL").arg(key)


def exists(key: Any) -> Cmd:
    """EXISTS: test whether keys exist."""
    return cmd("EXISTS").arg(key)


def expire(key: Any, seconds: int) -> Cmd:
    """EXPIRE: set a time to live in seconds."""
    return cmd("EXPIRE").arg(key).arg(_non_negative(seconds, "seconds"))


def expire_at(key: Any, ts: int) -> Cmd:
    """EXPIREAT: expire at a UNIX timestamp in seconds."""
    return cmd("EXPIREAT").arg(key).arg(_non_negative(ts, "timestamp"))


def pexpire(key: Any, ms: int) -> Cmd:
    """PEXPIRE: set a time to live in milliseconds."""
    return cmd("PEXPIRE").arg(key).arg(_non_negative(ms, "milliseconds"))


def pexpire_at(key: Any, ts: int) -> Cmd:
    """PEXPIREAT: expire at a UNIX timestamp in milliseconds."""
    return cmd("PEXPIREAT").arg(key).arg(_non_negative(ts, "timestamp"))


def persist(key: Any) -> Cmd:
    """PERSIST: remove the expiration of a key."""
    return cmd("PERSIST").arg(key)


def ttl(key: Any) -> Cmd:
    """TTL of a key in seconds."""
    return cmd("TTL").arg(key)


def pttl(key: Any) -> Cmd:
    """PTTL of a key in milliseconds."""
    return cmd("PTTL").arg(key)


def get_ex(key: Any, expire_at: Expiry) -> Cmd:
    """GETEX: get a value and change its expiration."""
    if not isinstance(expire_at, Expiry):
        raise TypeError("expire_at must be an Expiry")
    return cmd("GETEX").arg(key).arg(expire_at)


def get_del(key: Any) -> Cmd:
    """GETDEL: get a value and delete the key."""
    return cmd("GETDEL").arg(key)


def rename(key: Any, new_key: Any) -> Cmd:
    """RENAME a key."""
    return cmd("RENAME").arg(key).arg(new_key)


def rename_nx(key: Any, new_key: Any) -> Cmd:
    """RENAMENX: rename only if the new key does not exist."""
    return cmd("RENAMENX").arg(key).arg(new_key)


def unlink(key: Any) -> Cmd:
    """UNLINK one or more keys."""
    return cmd("UNLINK").arg(key)


def append(key: Any, value: Any) -> Cmd:
    """APPEND a value to a key."""
    return cmd("APPEND").arg(key).arg(value)


def incr(key: Any, delta: Any) -> Cmd:
    """INCRBY, or INCRBYFLOAT when ``delta`` is a float."""
    is_float = describe_numeric_behavior(delta) is NumericBehavior.NUMBER_IS_FLOAT
    return cmd("INCRBYFLOAT" if is_float else "INCRBY").arg(key).arg(delta)


def decr(key: Any, delta: Any) -> Cmd:
    """DECRBY a key by ``delta``."""
    return cmd("DECRBY").arg(key).arg(delta)


def setbit(key: Any, offset: int, value: bool) -> Cmd:
    """SETBIT: set or clear the bit at ``offset``."""
    return (
        cmd("SETBIT")
        .arg(key)
        .arg(_non_negative(offset, "offset"))
        .arg(1 if value else 0)
    )


def getbit(key: Any, offset: int) -> Cmd:
    """GETBIT: read the bit at ``offset``."""
    return cmd("GETBIT").arg(key).arg(_non_negative(offset, "offset"))


def bitcount(key: Any) -> Cmd:
    """BITCOUNT over the whole string."""
    return cmd("BITCOUNT").arg(key)


def bitcount_range(key: Any, start: int, end: int) -> Cmd:
    """BITCOUNT within a byte range."""
    return (
        cmd("BITCOUNT")
        .arg(key)
        .arg(_non_negative(start, "start"))
        .arg(_non_negative(end, "end"))
    )


def bit_and(dstkey: Any, srckeys: Any) -> Cmd:
    """BITOP AND into ``dstkey``."""
    return cmd("BITOP").arg("AND").arg(dstkey).arg(srckeys)


def bit_or(dstkey: Any, srckeys: Any) -> Cmd:
    """BITOP OR into ``dstkey``."""
    return cmd("BITOP").arg("OR").arg(dstkey).arg(srckeys)


def bit_xor(dstkey: Any, srckeys: Any) -> Cmd:
    """BITOP XOR into ``dstkey``."""
    return cmd("BITOP").arg("XOR").arg(dstkey).arg(srckeys)


def bit_not(dstkey: Any, srckey: Any) -> Cmd:
    """BITOP NOT into ``dstkey``."""
    return cmd("BITOP").arg("NOT").arg(dstkey).arg(srckey)


def strlen(key: Any) -> Cmd:
    """STRLEN of a value."""
    return cmd("STRLEN").arg(key)


def object_encoding(key: Any) -> Cmd:
    """OBJECT ENCODING of a key."""
    return cmd("OBJECT").arg("ENCODING").arg(key)


def object_idletime(key: Any) -> Cmd:
    """OBJECT IDLETIME of a key."""
    return cmd("OBJECT").arg("IDLETIME").arg(key)


def object_freq(key: Any) -> Cmd:
    """OBJECT FREQ of a key."""
    return cmd("OBJECT").arg("FREQ").arg(key)


def object_refcount(key: Any) -> Cmd:
    """OBJECT REFCOUNT of a key."""
    return cmd("OBJECT").arg("REFCOUNT").arg(key)


def publish(channel: Any, message: Any) -> Cmd:
    """PUBLISH a message to a channel."""
    return cmd("PUBLISH").arg(channel).arg(message)


def scan() -> Cmd:
    """SCAN the key space from cursor 0."""
    return cmd("SCAN").cursor_arg(0)


def scan_match(pattern: Any) -> Cmd:
    """SCAN the key space for keys matching ``pattern``."""
    return cmd("SCAN").cursor_arg(0).arg("MATCH").arg(pattern)