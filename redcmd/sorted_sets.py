"""Builders for sorted set commands."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .cmd import Cmd, cmd


def _integer(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer")
    return value


def _key_list(keys: Any) -> list[Any]:
    """Accept a sequence of keys; a lone string is refused since it has no count."""
    if isinstance(keys, (str, bytes, bytearray, memoryview)) or not isinstance(
        keys, (Sequence, set, frozenset)
    ):
        raise TypeError("keys must be a sequence of keys")
    return list(keys)


def _split_weights(pairs: Any) -> tuple[list[Any], list[Any]]:
    items = _key_list(pairs)
    keys: list[Any] = []
    weights: list[Any] = []
    for item in items:
        if not isinstance(item, (tuple, list)) or len(item) != 2:
            raise TypeError("each entry must be a (key, weight) pair")
        key, weight = item
        keys.append(key)
        weights.append(weight)
    return keys, weights


def _store(name: str, dstkey: Any, keys: Any, aggregate: str | None) -> Cmd:
    key_list = _key_list(keys)
    command = cmd(name).arg(dstkey).arg(len(key_list)).arg(key_list)
    if aggregate is not None:
        command.arg("AGGREGATE").arg(aggregate)
    return command


def _store_weights(name: str, dstkey: Any, pairs: Any, aggregate: str | None) -> Cmd:
    keys, weights = _split_weights(pairs)
    command = cmd(name).arg(dstkey).arg(len(keys)).arg(keys)
    if aggregate is not None:
        command.arg("AGGREGATE").arg(aggregate)
    return command.arg("WEIGHTS").arg(weights)


def zadd(key: Any, member: Any, score: Any) -> Cmd:
    """ZADD one member with ``score``."""
    return cmd("ZADD").arg(key).arg(score).arg(member)


def zadd_multiple(key: Any, items: Any) -> Cmd:
    """ZADD several ``(score, member)`` pairs."""
    return cmd("ZADD").arg(key).arg(items)


def zcard(key: Any) -> Cmd:
    """ZCARD: the number of members."""
    return cmd("ZCARD").arg(key)


def zcount(key: Any, min: Any, max: Any) -> Cmd:  # noqa: A002
    """ZCOUNT members with scores between ``min`` and ``max``."""
    return cmd("ZCOUNT").arg(key).arg(min).arg(max)


def zincr(key: Any, member: Any, delta: Any) -> Cmd:
    """ZINCRBY the score of ``member`` by ``delta``."""
    return cmd("ZINCRBY").arg(key).arg(delta).arg(member)


def zinterstore(dstkey: Any, keys: Any) -> Cmd:
    """ZINTERSTORE with SUM aggregation."""
    return _store("ZINTERSTORE", dstkey, keys, None)


def zinterstore_min(dstkey: Any, keys: Any) -> Cmd:
    """ZINTERSTORE with MIN aggregation."""
    return _store("ZINTERSTORE", dstkey, keys, "MIN")


def zinterstore_max(dstkey: Any, keys: Any) -> Cmd:
    """ZINTERSTORE with MAX aggregation."""
    return _store("ZINTERSTORE", dstkey, keys, "MAX")


def zinterstore_weights(dstkey: Any, keys: Any) -> Cmd:
    """ZINTERSTORE with a weight per ``(key, weight)`` pair."""
    return _store_weights("ZINTERSTORE", dstkey, keys, None)


def zinterstore_min_weights(dstkey: Any, keys: Any) -> Cmd:
    """ZINTERSTORE with MIN aggregation and weights."""
    return _store_weights("ZINTERSTORE", dstkey, keys, "MIN")


def zinterstore_max_weights(dstkey: Any, keys: Any) -> Cmd:
    """ZINTERSTORE with MAX aggregation and weights."""
    return _store_weights("ZINTERSTORE", dstkey, keys, "MAX")


def zlexcount(key: Any, min: Any, max: Any) -> Cmd:  # noqa: A002
    """ZLEXCOUNT members in a lexicographical range."""
    return cmd("ZLEXCOUNT").arg(key).arg(min).arg(max)


def zpopmax(key: Any, count: int) -> Cmd:
    """ZPOPMAX: remove up to ``count`` members with the highest scores."""
    return cmd("ZPOPMAX").arg(key).arg(_integer(count, "count"))


def zpopmin(key: Any, count: int) -> Cmd:
    """ZPOPMIN: remove up to ``count`` members with the lowest scores."""
    return cmd("ZPOPMIN").arg(key).arg(_integer(count, "count"))


def zmpop_max(keys: Any, count: int) -> Cmd:
    """ZMPOP MAX from the first non-empty sorted set."""
    key_list = _key_list(keys)
    return (
        cmd("ZMPOP")
        .arg(len(key_list))
        .arg(key_list)
        .arg("MAX")
        .arg("COUNT")
        .arg(_integer(count, "count"))
    )


def zmpop_min(keys: Any, count: int) -> Cmd:
    """ZMPOP MIN from the first non-empty sorted set."""
    key_list = _key_list(keys)
    return (
        cmd("ZMPOP")
        .arg(len(key_list))
        .arg(key_list)
        .arg("MIN")
        .arg("COUNT")
        .arg(_integer(count, "count"))
    )


def zrandmember(key: Any, count: int | None = None) -> Cmd:
    """ZRANDMEMBER: up to ``count`` random members, or one when ``count`` is None."""
    command = cmd("ZRANDMEMBER").arg(key)
    if count is not None:
        command.arg(_integer(count, "count"))
    return command


def zrandmember_withscores(key: Any, count: int) -> Cmd:
    """ZRANDMEMBER with scores."""
    return (
        cmd("ZRANDMEMBER")
        .arg(key)
        .arg(_integer(count, "count"))
        .arg("WITHSCORES")
    )


def _index_range(name: str, key: Any, start: int, stop: int) -> Cmd:
    return cmd(name).arg(key).arg(_integer(start, "start")).arg(_integer(stop, "stop"))


def zrange(key: Any, start: int, stop: int) -> Cmd:
    """ZRANGE by index."""
    return _index_range("ZRANGE", key, start, stop)


def zrange_withscores(key: Any, start: int, stop: int) -> Cmd:
    """ZRANGE by index with scores."""
    return _index_range("ZRANGE", key, start, stop).arg("WITHSCORES")


def _limit(command: Cmd, offset: int, count: int) -> Cmd:
    return (
        command.arg("LIMIT")
        .arg(_integer(offset, "offset"))
        .arg(_integer(count, "count"))
    )


def zrangebylex(key: Any, min: Any, max: Any) -> Cmd:  # noqa: A002
    """ZRANGEBYLEX between ``min`` and ``max``."""
    return cmd("ZRANGEBYLEX").arg(key).arg(min).arg(max)


def zrangebylex_limit(
    key: Any, min: Any, max: Any, offset: int, count: int  # noqa: A002
) -> Cmd:
    """ZRANGEBYLEX with LIMIT."""
    return _limit(cmd("ZRANGEBYLEX").arg(key).arg(min).arg(max), offset, count)


def zrevrangebylex(key: Any, max: Any, min: Any) -> Cmd:  # noqa: A002
    """ZREVRANGEBYLEX from ``max`` down to ``min``."""
    return cmd("ZREVRANGEBYLEX").arg(key).arg(max).arg(min)


def zrevrangebylex_limit(
    key: Any, max: Any, min: Any, offset: int, count: int  # noqa: A002
) -> Cmd:
    """ZREVRANGEBYLEX with LIMIT."""
    return _limit(cmd("ZREVRANGEBYLEX").arg(key).arg(max).arg(min), offset, count)


def zrangebyscore(key: Any, min: Any, max: Any) -> Cmd:  # noqa: A002
    """ZRANGEBYSCORE between ``min`` and ``max``."""
    return cmd("ZRANGEBYSCORE").arg(key).arg(min).arg(max)


def zrangebyscore_withscores(key: Any, min: Any, max: Any) -> Cmd:  # noqa: A002
    """ZRANGEBYSCORE with scores."""
    return cmd("ZRANGEBYSCORE").arg(key).arg(min).arg(max).arg("WITHSCORES")


def zrangebyscore_limit(
    key: Any, min: Any, max: Any, offset: int, count: int  # noqa: A002
) -> Cmd:
    """ZRANGEBYSCORE with LIMIT."""
    return _limit(cmd("ZRANGEBYSCORE").arg(key).arg(min).arg(max), offset, count)


def zrangebyscore_limit_withscores(
    key: Any, min: Any, max: Any, offset: int, count: int  # noqa: A002
) -> Cmd:
    """ZRANGEBYSCORE with scores and LIMIT."""
    return _limit(
        cmd("ZRANGEBYSCORE").arg(key).arg(min).arg(max).arg("WITHSCORES"),
        offset,
        count,
    )


def zrank(key: Any, member: Any) -> Cmd:
    """ZRANK of a member."""
    return cmd("ZRANK").arg(key).arg(member)


def zrem(key: Any, members: Any) -> Cmd:
    """ZREM one or more members."""
    return cmd("ZREM").arg(key).arg(members)


def zrembylex(key: Any, min: Any, max: Any) -> Cmd:  # noqa: A002
    """ZREMRANGEBYLEX between ``min`` and ``max``."""
    return cmd("ZREMRANGEBYLEX").arg(key).arg(min).arg(max)


def zremrangebyrank(key: Any, start: int, stop: int) -> Cmd:
    """ZREMRANGEBYRANK within the given indexes."""
    return _index_range("ZREMRANGEBYRANK", key, start, stop)


def zrembyscore(key: Any, min: Any, max: Any) -> Cmd:  # noqa: A002
    """ZREMRANGEBYSCORE between ``min`` and ``max``."""
    return cmd("ZREMRANGEBYSCORE").arg(key).arg(min).arg(max)


def zrevrange(key: Any, start: int, stop: int) -> Cmd:
    """ZREVRANGE by index, high to low."""
    return _index_range("ZREVRANGE", key, start, stop)


def zrevrange_withscores(key: Any, start: int, stop: int) -> Cmd:
    """ZREVRANGE by index with scores."""
    return _index_range("ZREVRANGE", key, start, stop).arg("WITHSCORES")


def zrevrangebyscore(key: Any, max: Any, min: Any) -> Cmd:  # noqa: A002
    """ZREVRANGEBYSCORE from ``max`` down to ``min``."""
    return cmd("ZREVRANGEBYSCORE").arg(key).arg(max).arg(min)


def zrevrangebyscore_withscores(key: Any, max: Any, min: Any) -> Cmd:  # noqa: A002
    """ZREVRANGEBYSCORE with scores."""
    return cmd("ZREVRANGEBYSCORE").arg(key).arg(max).arg(min).arg("WITHSCORES")


def zrevrangebyscore_limit(
    key: Any, max: Any, min: Any, offset: int, count: int  # noqa: A002
) -> Cmd:
    """ZREVRANGEBYSCORE with LIMIT."""
    return _limit(cmd("ZREVRANGEBYSCORE").arg(key).arg(max).arg(min), offset, count)


def zrevrangebyscore_limit_withscores(
    key: Any, max: Any, min: Any, offset: int, count: int  # noqa: A002
) -> Cmd:
    """ZREVRANGEBYSCORE with scores and LIMIT."""
    return _limit(
        cmd("ZREVRANGEBYSCORE").arg(key).arg(max).arg(min).arg("WITHSCORES"),
        offset,
        count,
    )


def zrevrank(key: Any, member: Any) -> Cmd:
    """ZREVRANK of a member, high to low."""
    return cmd("ZREVRANK").arg(key).arg(member)


def zscore(key: Any, member: Any) -> Cmd:
    """ZSCORE of a member."""
    return cmd("ZSCORE").arg(key).arg(member)


def zscore_multiple(key: Any, members: Any) -> Cmd:
    """ZMSCORE of several members."""
    return cmd("ZMSCORE").arg(key).arg(_key_list(members))


def zunionstore(dstkey: Any, keys: Any) -> Cmd:
    """ZUNIONSTORE with SUM aggregation."""
    return _store("ZUNIONSTORE", dstkey, keys, None)


def zunionstore_min(dstkey: Any, keys: Any) -> Cmd:
    """ZUNIONSTORE with MIN aggregation."""
    return _store("ZUNIONSTORE", dstkey, keys, "MIN")


def zunionstore_max(dstkey: Any, keys: Any) -> Cmd:
    """ZUNIONSTORE with MAX aggregation."""
    return _store("ZUNIONSTORE", dstkey, keys, "MAX")


def zunionstore_weights(dstkey: Any, keys: Any) -> Cmd:
    """ZUNIONSTORE with a weight per ``(key, weight)`` pair."""
    return _store_weights("ZUNIONSTORE", dstkey, keys, None)


def zunionstore_min_weights(dstkey: Any, keys: Any) -> Cmd:
    """ZUNIONSTORE with MIN aggregation and weights."""
    return _store_weights("ZUNIONSTORE", dstkey, keys, "MIN")


def zunionstore_max_weights(dstkey: Any, keys: Any) -> Cmd:
    """ZUNIONSTORE with MAX aggregation and weights."""
    return _store_weights("ZUNIONSTORE", dstkey, keys, "MAX")


def zscan(key: Any) -> Cmd:
    """ZSCAN a sorted set from cursor 0."""
    return cmd("ZSCAN").arg(key).cursor_arg(0)


def zscan_match(key: Any, pattern: Any) -> Cmd:
    """ZSCAN a sorted set for members matching ``pattern``."""
    return cmd("ZSCAN").arg(key).cursor_arg(0).arg("MATCH").arg(pattern)