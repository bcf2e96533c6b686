"""Builders for JSON document commands (JSON.*)."""

from __future__ import annotations

import json
from typing import Any

from .cmd import Cmd, cmd, is_single_arg


def _integer(value: int, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer")
    return value


def _serialize(value: Any) -> str:
    """Encode ``value`` as compact JSON text.

    Raises TypeError for values that have no JSON form and ValueError for
    non-finite floats.
    """
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _key_path(name: str, key: Any, path: Any) -> Cmd:
    return cmd(name).arg(key).arg(path)


def json_arr_append(key: Any, path: Any, value: Any) -> Cmd:
    """JSON.ARRAPPEND: append ``value`` to the array at ``path``."""
    return _key_path("JSON.ARRAPPEND", key, path).arg(_serialize(value))


def json_arr_index(key: Any, path: Any, value: Any) -> Cmd:
    """JSON.ARRINDEX: the first index of ``value`` in the array at ``path``."""
    return _key_path("JSON.ARRINDEX", key, path).arg(_serialize(value))


def json_arr_index_ss(key: Any, path: Any, value: Any, start: int, stop: int) -> Cmd:
    """JSON.ARRINDEX within ``start`` and ``stop``; zero for either means no bound."""
    return (
        _key_path("JSON.ARRINDEX", key, path)
        .arg(_serialize(value))
        .arg(_integer(start, "start"))
        .arg(_integer(stop, "stop"))
    )


def json_arr_insert(key: Any, path: Any, index: int, value: Any) -> Cmd:
    """JSON.ARRINSERT: insert ``value`` before ``index`` in the array at ``path``."""
    return (
        _key_path("JSON.ARRINSERT", key, path)
        .arg(_integer(index, "index"))
        .arg(_serialize(value))
    )


def json_arr_len(key: Any, path: Any) -> Cmd:
    """JSON.ARRLEN: the length of the array at ``path``."""
    return _key_path("JSON.ARRLEN", key, path)


def json_arr_pop(key: Any, path: Any, index: int = -1) -> Cmd:
    """JSON.ARRPOP: remove and return the element at ``index`` (default last)."""
    return _key_path("JSON.ARRPOP", key, path).arg(_integer(index, "index"))


def json_arr_trim(key: Any, path: Any, start: int, stop: int) -> Cmd:
    """JSON.ARRTRIM: keep only the inclusive range ``start``..``stop``."""
    return (
        _key_path("JSON.ARRTRIM", key, path)
        .arg(_integer(start, "start"))
        .arg(_integer(stop, "stop"))
    )


def json_clear(key: Any, path: Any) -> Cmd:
    """JSON.CLEAR: empty containers and zero numbers at ``path``."""
    return _key_path("JSON.CLEAR", key, path)


def json_del(key: Any, path: Any) -> Cmd:
    """JSON.DEL: delete the value at ``path``."""
    return _key_path("JSON.DEL", key, path)


def json_get(key: Any, path: Any) -> Cmd:
    """JSON.GET for a single key, JSON.MGET when ``key`` holds several keys."""
    name = "JSON.GET" if is_single_arg(key) else "JSON.MGET"
    return _key_path(name, key, path)


def json_num_incr_by(key: Any, path: Any, value: int) -> Cmd:
    """JSON.NUMINCRBY: increment the number at ``path`` by ``value``."""
    return _key_path("JSON.NUMINCRBY", key, path).arg(_integer(value, "value"))


def json_obj_keys(key: Any, path: Any) -> Cmd:
    """JSON.OBJKEYS: the keys of the object at ``path``."""
    return _key_path("JSON.OBJKEYS", key, path)


def json_obj_len(key: Any, path: Any) -> Cmd:
    """JSON.OBJLEN: the number of keys of the object at ``path``."""
    return _key_path("JSON.OBJLEN", key, path)


def json_set(key: Any, path: Any, value: Any) -> Cmd:
    """JSON.SET: store ``value`` at ``path``."""
    return _key_path("JSON.SET", key, path).arg(_serialize(value))


def json_str_append(key: Any, path: Any, value: Any) -> Cmd:
    """JSON.STRAPPEND: append JSON string text to the string at ``path``."""
    return _key_path("JSON.STRAPPEND", key, path).arg(value)


def json_str_len(key: Any, path: Any) -> Cmd:
    """JSON.STRLEN: the length of the string at ``path``."""
    return _key_path("JSON.STRLEN", key, path)


def json_toggle(key: Any, path: Any) -> Cmd:
    """JSON.TOGGLE: flip the boolean at ``path``."""
    return _key_path("JSON.TOGGLE", key, path)


def json_type(key: Any, path: Any) -> Cmd:
    """JSON.TYPE: the type of the value at ``path``."""
    return _key_path("JSON.TYPE", key, path)