"""Command building: argument encoding, commands and pipelines."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from typing import Any

_BINARY = (bytes, bytearray, memoryview)
_SCALARS = (*_BINARY, str, int, float)
_SEQUENCES = (list, tuple, set, frozenset)


class NumericBehavior(enum.Enum):
    """How a value behaves when used as a numeric argument."""

    NON_NUMERIC = "non_numeric"
    NUMBER_IS_INTEGER = "integer"
    NUMBER_IS_FLOAT = "float"


def _custom_method(value: Any, name: str):
    if isinstance(value, type):
        return None
    method = getattr(value, name, None)
    return method if callable(method) else None


def to_redis_args(value: Any) -> list[bytes]:
    """Encode a value as the list of raw arguments it contributes to a command.

    ``None`` contributes nothing, sequences and mappings are flattened and
    objects providing ``to_redis_args()`` encode themselves.
    """
    if value is None:
        return []
    converter = _custom_method(value, "to_redis_args")
    if converter is not None:
        return [bytes(item) for item in converter()]
    if isinstance(value, bool):
        return [b"1" if value else b"0"]
    if isinstance(value, _BINARY):
        return [bytes(value)]
    if isinstance(value, str):
        return [value.encode("utf-8")]
    if isinstance(value, int):
        return [str(value).encode("ascii")]
    if isinstance(value, float):
        return [repr(value).encode("ascii")]
    if isinstance(value, Mapping):
        return [
            encoded
            for key, item in value.items()
            for encoded in (*to_redis_args(key), *to_redis_args(item))
        ]
    if isinstance(value, _SEQUENCES):
        return [encoded for item in value for encoded in to_redis_args(item)]
    raise TypeError(f"cannot use {type(value).__name__!r} as a command argument")


def is_single_arg(value: Any) -> bool:
    """Tell whether a value encodes to exactly one argument."""
    if value is None:
        return False
    checker = _custom_method(value, "is_single_arg")
    if checker is not None:
        return bool(checker())
    if isinstance(value, _SCALARS):
        return True
    if isinstance(value, Mapping):
        return False
    if isinstance(value, _SEQUENCES):
        return len(value) == 1 and is_single_arg(next(iter(value)))
    if _custom_method(value, "to_redis_args") is not None:
        return len(to_redis_args(value)) == 1
    raise TypeError(f"cannot use {type(value).__name__!r} as a command argument")


def describe_numeric_behavior(value: Any) -> NumericBehavior:
    """Classify a value as an integer, a float or something non-numeric."""
    describer = _custom_method(value, "describe_numeric_behavior")
    if describer is not None:
        return describer()
    if isinstance(value, bool):
        return NumericBehavior.NON_NUMERIC
    if isinstance(value, int):
        return NumericBehavior.NUMBER_IS_INTEGER
    if isinstance(value, float):
        return NumericBehavior.NUMBER_IS_FLOAT
    return NumericBehavior.NON_NUMERIC


_READONLY_COMMANDS = frozenset(
    name.encode("ascii")
    for name in (
        # @admin
        "LASTSAVE",
        # @bitmap
        "BITCOUNT", "BITFIELD_RO", "BITPOS", "GETBIT",
        # @connection
        "CLIENT", "ECHO",
        # @geo
        "GEODIST", "GEOHASH", "GEOPOS", "GEORADIUSBYMEMBER_RO", "GEORADIUS_RO",
        "GEOSEARCH",
        # @hash
        "HEXISTS", "HGET", "HGETALL", "HKEYS", "HLEN", "HMGET", "HRANDFIELD",
        "HSCAN", "HSTRLEN", "HVALS",
        # @hyperloglog
        "PFCOUNT",
        # @keyspace
        "DBSIZE", "DUMP", "EXISTS", "EXPIRETIME", "KEYS", "OBJECT",
        "PEXPIRETIME", "PTTL", "RANDOMKEY", "SCAN", "TOUCH", "TTL", "TYPE",
        # @list
        "LINDEX", "LLEN", "LPOS", "LRANGE", "SORT_RO",
        # @scripting
        "EVALSHA_RO", "EVAL_RO", "FCALL_RO",
        # @set
        "SCARD", "SDIFF", "SINTER", "SINTERCARD", "SISMEMBER", "SMEMBERS",
        "SMISMEMBER", "SRANDMEMBER", "SSCAN", "SUNION",
        # @sortedset
        "ZCARD", "ZCOUNT", "ZDIFF", "ZINTER", "ZINTERCARD", "ZLEXCOUNT",
        "ZMSCORE", "ZRANDMEMBER", "ZRANGE", "ZRANGEBYLEX", "ZRANGEBYSCORE",
        "ZRANK", "ZREVRANGE", "ZREVRANGEBYLEX", "ZREVRANGEBYSCORE", "ZREVRANK",
        "ZSCAN", "ZSCORE", "ZUNION",
        # @stream
        "XINFO", "XLEN", "XPENDING", "XRANGE", "XREAD", "XREVRANGE",
        # @string
        "GET", "GETRANGE", "LCS", "MGET", "STRALGO", "STRLEN", "SUBSTR",
    )
)


def is_readonly_cmd(name: str | bytes) -> bool:
    """Tell whether a command name (exact case) only reads data."""
    if isinstance(name, str):
        name = name.encode("utf-8")
    return bytes(name) in _READONLY_COMMANDS


_CURSOR = object()


class Cmd:
    """A single command and its encoded arguments."""

    def __init__(self, name: str | bytes) -> None:
        if not isinstance(name, (str, *_BINARY)):
            raise TypeError("command name must be str or bytes")
        encoded = to_redis_args(name)
        if not encoded[0]:
            raise ValueError("command name must not be empty")
        self._parts: list[Any] = encoded
        self.cursor: int | None = None

    def arg(self, value: Any) -> Cmd:
        """Append the arguments encoded from ``value``."""
        self._parts.extend(to_redis_args(value))
        return self

    def cursor_arg(self, cursor: int) -> Cmd:
        """Append a cursor slot that is filled from ``self.cursor``."""
        if self.cursor is not None:
            raise ValueError("command already has a cursor argument")
        if isinstance(cursor, bool) or not isinstance(cursor, int) or cursor < 0:
            raise ValueError("cursor must be a non-negative integer")
        self._parts.append(_CURSOR)
        self.cursor = cursor
        return self

    def args(self) -> list[bytes]:
        """Return the command name followed by its arguments."""
        return [
            str(self.cursor).encode("ascii") if part is _CURSOR else part
            for part in self._parts
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cmd):
            return NotImplemented
        return self.args() == other.args()

    def __repr__(self) -> str:
        return f"Cmd({self.args()!r})"


def cmd(name: str | bytes) -> Cmd:
    """Start building a command called ``name``."""
    return Cmd(name)


class Pipeline:
    """An ordered batch of commands."""

    def __init__(self) -> None:
        self._commands: list[Cmd] = []

    def add_command(self, command: Cmd) -> Pipeline:
        """Append a command to the batch."""
        if not isinstance(command, Cmd):
            raise TypeError("only Cmd instances can be added to a pipeline")
        self._commands.append(command)
        return self

    def commands(self) -> tuple[Cmd, ...]:
        """Return the queued commands in order."""
        return tuple(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Cmd]:
        return iter(self._commands)