"""Builders for stream commands."""

from __future__ import annotations

from typing import Any

from .cmd import Cmd, cmd


def xack(key: Any, group: Any, ids: Any) -> Cmd:
    """XACK: acknowledge pending messages of a consumer group."""
    return cmd("XACK").arg(key).arg(group).arg(ids)


def xadd(key: Any, id: Any, items: Any) -> Cmd:  # noqa: A002
    """XADD a message made of ``(field, value)`` pairs; ``*`` picks the id."""
    return cmd("XADD").arg(key).arg(id).arg(items)


def xadd_map(key: Any, id: Any, mapping: Any) -> Cmd:  # noqa: A002
    """XADD a message given as a mapping of fields to values."""
    return cmd("XADD").arg(key).arg(id).arg(mapping)


def xclaim(key: Any, group: Any, consumer: Any, min_idle_time: Any, ids: Any) -> Cmd:
    """XCLAIM pending messages idle for at least ``min_idle_time``."""
    return (
        cmd("XCLAIM")
        .arg(key)
        .arg(group)
        .arg(consumer)
        .arg(min_idle_time)
        .arg(ids)
    )


def xdel(key: Any, ids: Any) -> Cmd:
    """XDEL messages by id."""
    return cmd("XDEL").arg(key).arg(ids)


def xgroup_create(key: Any, group: Any, id: Any) -> Cmd:  # noqa: A002
    """XGROUP CREATE a consumer group on an existing stream."""
    return cmd("XGROUP").arg("CREATE").arg(key).arg(group).arg(id)


def xgroup_create_mkstream(key: Any, group: Any, id: Any) -> Cmd:  # noqa: A002
    """XGROUP CREATE ... MKSTREAM: create the group and the stream if missing."""
    return cmd("XGROUP").arg("CREATE").arg(key).arg(group).arg(id).arg("MKSTREAM")


def xgroup_setid(key: Any, group: Any, id: Any) -> Cmd:  # noqa: A002
    """XGROUP SETID: change where a group reads from."""
    return cmd("XGROUP").arg("SETID").arg(key).arg(group).arg(id)


def xgroup_destroy(key: Any, group: Any) -> Cmd:
    """XGROUP DESTROY a consumer group."""
    return cmd("XGROUP").arg("DESTROY").arg(key).arg(group)


def xgroup_delconsumer(key: Any, group: Any, consumer: Any) -> Cmd:
    """XGROUP DELCONSUMER: remove a consumer from a group."""
    return cmd("XGROUP").arg("DELCONSUMER").arg(key).arg(group).arg(consumer)


def xinfo_consumers(key: Any, group: Any) -> Cmd:
    """XINFO CONSUMERS of a group."""
    return cmd("XINFO").arg("CONSUMERS").arg(key).arg(group)


def xinfo_groups(key: Any) -> Cmd:
    """XINFO GROUPS of a stream."""
    return cmd("XINFO").arg("GROUPS").arg(key)


def xinfo_stream(key: Any) -> Cmd:
    """XINFO STREAM: high-level details of a stream."""
    return cmd("XINFO").arg("STREAM").arg(key)


def xlen(key: Any) -> Cmd:
    """XLEN: the number of messages in a stream."""
    return cmd("XLEN").arg(key)


def xpending(key: Any, group: Any) -> Cmd:
    """XPENDING summary for a consumer group."""
    return cmd("XPENDING").arg(key).arg(group)


def xpending_count(key: Any, group: Any, start: Any, end: Any, count: Any) -> Cmd:
    """XPENDING over a range, limited to ``count`` messages."""
    return cmd("XPENDING").arg(key).arg(group).arg(start).arg(end).arg(count)


def xpending_consumer_count(
    key: Any, group: Any, start: Any, end: Any, count: Any, consumer: Any
) -> Cmd:
    """XPENDING over a range for a single consumer."""
    return (
        cmd("XPENDING")
        .arg(key)
        .arg(group)
        .arg(start)
        .arg(end)
        .arg(count)
        .arg(consumer)
    )


def xrange(key: Any, start: Any, end: Any) -> Cmd:
    """XRANGE: messages between ``start`` and ``end``."""
    return cmd("XRANGE").arg(key).arg(start).arg(end)


def xrange_all(key: Any) -> Cmd:
    """XRANGE over the whole stream."""
    return cmd("XRANGE").arg(key).arg("-").arg("+")


def xrange_count(key: Any, start: Any, end: Any, count: Any) -> Cmd:
    """XRANGE limited to ``count`` messages."""
    return cmd("XRANGE").arg(key).arg(start).arg(end).arg("COUNT").arg(count)


def xread(keys: Any, ids: Any) -> Cmd:
    """XREAD STREAMS: read from each key starting after the matching id."""
    return cmd("XREAD").arg("STREAMS").arg(keys).arg(ids)


def xrevrange(key: Any, end: Any, start: Any) -> Cmd:
    """XREVRANGE: messages from ``end`` back to ``start``."""
    return cmd("XREVRANGE").arg(key).arg(end).arg(start)


def xrevrange_all(key: Any) -> Cmd:
    """XREVRANGE over the whole stream."""
    return cmd("XREVRANGE").arg(key).arg("+").arg("-")


def xrevrange_count(key: Any, end: Any, start: Any, count: Any) -> Cmd:
    """XREVRANGE limited to ``count`` messages."""
    return cmd("XREVRANGE").arg(key).arg(end).arg(start).arg("COUNT").arg(count)