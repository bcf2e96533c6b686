import pytest

from redcmd import keyspace
from redcmd.options import Expiry, ExpiryKind


def test_get_single_key_uses_get():
    assert keyspace.get("k").args() == [b"GET", b"k"]


def test_get_many_keys_uses_mget():
    assert keyspace.get(["a", "b"]).args() == [b"MGET", b"a", b"b"]


def test_get_one_element_list_is_single():
    assert keyspace.get(["a"]).args()[0] == b"GET"


def test_mset_flattens_pairs():
    command = keyspace.mset([("a", 1), ("b", 2)])
    assert command.args() == [b"MSET", b"a", b"1", b"b", b"2"]


def test_set_multiple_warns_and_matches_mset():
    items = [("a", "x")]
    with pytest.warns(DeprecationWarning):
        command = keyspace.set_multiple(items)
    assert command == keyspace.mset(items)


def test_set_ex_puts_seconds_before_value():
    assert keyspace.set_ex("k", "v", 10).args() == [b"SETEX", b"k", b"10", b"v"]


def test_pset_ex_puts_milliseconds_before_value():
    assert keyspace.pset_ex("k", "v", 1500).args() == [b"PSETEX", b"k", b"1500", b"v"]


@pytest.mark.parametrize(
    "call",
    [
        lambda: keyspace.set_ex("k", "v", -1),
        lambda: keyspace.expire("k", -5),
        lambda: keyspace.getbit("k", -1),
        lambda: keyspace.pexpire_at("k", True),
    ],
)
def test_negative_unsigned_arguments_rejected(call):
    with pytest.raises(ValueError):
        call()


def test_getrange_accepts_negative_offsets():
    assert keyspace.getrange("k", 0, -1).args() == [b"GETRANGE", b"k", b"0", b"-1"]


def test_delete_uses_del():
    assert keyspace.delete(["a", "b"]).args() == [b"DEL", b"a", b"b"]


def test_get_ex_with_time():
    command = keyspace.get_ex("k", Expiry(ExpiryKind.EX, 60))
    assert command.args() == [b"GETEX", b"k", b"EX", b"60"]


def test_get_ex_persist_has_no_time():
    command = keyspace.get_ex("k", Expiry(ExpiryKind.PERSIST))
    assert command.args() == [b"GETEX", b"k", b"PERSIST"]


def test_get_ex_requires_expiry():
    with pytest.raises(TypeError):
        keyspace.get_ex("k", 60)


def test_incr_integer_and_float():
    assert keyspace.incr("k", 2).args() == [b"INCRBY", b"k", b"2"]
    assert keyspace.incr("k", 1.5).args() == [b"INCRBYFLOAT", b"k", b"1.5"]


def test_decr():
    assert keyspace.decr("k", 3).args() == [b"DECRBY", b"k", b"3"]


def test_setbit_encodes_bool():
    assert keyspace.setbit("k", 7, True).args()[-1] == b"1"
    assert keyspace.setbit("k", 7, False).args()[-1] == b"0"


@pytest.mark.parametrize(
    "builder, op",
    [
        (keyspace.bit_and, b"AND"),
        (keyspace.bit_or, b"OR"),
        (keyspace.bit_xor, b"XOR"),
    ],
)
def test_bitop(builder, op):
    assert builder("dst", ["a", "b"]).args() == [b"BITOP", op, b"dst", b"a", b"b"]


def test_bit_not():
    assert keyspace.bit_not("dst", "src").args() == [b"BITOP", b"NOT", b"dst", b"src"]


@pytest.mark.parametrize(
    "builder, sub",
    [
        (keyspace.object_encoding, b"ENCODING"),
        (keyspace.object_idletime, b"IDLETIME"),
        (keyspace.object_freq, b"FREQ"),
        (keyspace.object_refcount, b"REFCOUNT"),
    ],
)
def test_object_subcommands(builder, sub):
    assert builder("k").args() == [b"OBJECT", sub, b"k"]


@pytest.mark.parametrize(
    "builder, name",
    [
        (keyspace.rename, b"RENAME"),
        (keyspace.rename_nx, b"RENAMENX"),
        (keyspace.getset, b"GETSET"),
        (keyspace.append, b"APPEND"),
        (keyspace.set, b"SET"),
        (keyspace.set_nx, b"SETNX"),
        (keyspace.publish, b"PUBLISH"),
    ],
)
def test_two_argument_commands(builder, name):
    assert builder("a", "b").args() == [name, b"a", b"b"]


def test_scan_starts_at_cursor_zero():
    command = keyspace.scan()
    assert command.args() == [b"SCAN", b"0"]
    assert command.cursor == 0


def test_scan_match_places_cursor_first():
    command = keyspace.scan_match("user:*")
    assert command.args() == [b"SCAN", b"0", b"MATCH", b"user:*"]


def test_scan_cursor_updates_args():
    command = keyspace.scan_match("x")
    command.cursor = 17
    assert command.args()[1] == b"17"