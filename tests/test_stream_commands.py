import pytest

from redcmd import stream_commands as xs
from redcmd.cmd import is_readonly_cmd


def test_xack():
    assert xs.xack("s", "g", ["1-0", "2-0"]).args() == [
        b"XACK",
        b"s",
        b"g",
        b"1-0",
        b"2-0",
    ]


def test_xadd_flattens_pairs():
    assert xs.xadd("s", "*", [("f", "v"), ("g", 1)]).args() == [
        b"XADD",
        b"s",
        b"*",
        b"f",
        b"v",
        b"g",
        b"1",
    ]


def test_xadd_map_keeps_mapping_order():
    assert xs.xadd_map("s", "*", {"a": "x", "b": "y"}).args() == [
        b"XADD",
        b"s",
        b"*",
        b"a",
        b"x",
        b"b",
        b"y",
    ]


def test_xadd_and_xadd_map_agree():
    pairs = [("a", "x"), ("b", "y")]
    assert xs.xadd("s", "*", pairs) == xs.xadd_map("s", "*", dict(pairs))


def test_xclaim():
    assert xs.xclaim("k1", "g1", "c1", 10, ["0"]).args() == [
        b"XCLAIM",
        b"k1",
        b"g1",
        b"c1",
        b"10",
        b"0",
    ]


def test_xdel():
    assert xs.xdel("s", ["1-0"]).args() == [b"XDEL", b"s", b"1-0"]


def test_xgroup_variants():
    assert xs.xgroup_create("s", "g", "$").args() == [
        b"XGROUP", b"CREATE", b"s", b"g", b"$"
    ]
    assert xs.xgroup_create_mkstream("s", "g", "$").args() == [
        b"XGROUP", b"CREATE", b"s", b"g", b"$", b"MKSTREAM"
    ]
    assert xs.xgroup_setid("s", "g", "0").args() == [
        b"XGROUP", b"SETID", b"s", b"g", b"0"
    ]
    assert xs.xgroup_destroy("s", "g").args() == [b"XGROUP", b"DESTROY", b"s", b"g"]
    assert xs.xgroup_delconsumer("s", "g", "c").args() == [
        b"XGROUP", b"DELCONSUMER", b"s", b"g", b"c"
    ]


def test_xinfo_variants():
    assert xs.xinfo_consumers("s", "g").args() == [b"XINFO", b"CONSUMERS", b"s", b"g"]
    assert xs.xinfo_groups("s").args() == [b"XINFO", b"GROUPS", b"s"]
    assert xs.xinfo_stream("s").args() == [b"XINFO", b"STREAM", b"s"]


def test_xlen():
    assert xs.xlen("s").args() == [b"XLEN", b"s"]


def test_xpending_variants():
    assert xs.xpending("s", "g").args() == [b"XPENDING", b"s", b"g"]
    assert xs.xpending_count("s", "g", "-", "+", 10).args() == [
        b"XPENDING", b"s", b"g", b"-", b"+", b"10"
    ]
    assert xs.xpending_consumer_count("s", "g", "-", "+", 10, "c").args() == [
        b"XPENDING", b"s", b"g", b"-", b"+", b"10", b"c"
    ]


def test_xrange_variants():
    assert xs.xrange("s", "1-0", "2-0").args() == [b"XRANGE", b"s", b"1-0", b"2-0"]
    assert xs.xrange_all("s").args() == [b"XRANGE", b"s", b"-", b"+"]
    assert xs.xrange_count("s", "-", "+", 3).args() == [
        b"XRANGE", b"s", b"-", b"+", b"COUNT", b"3"
    ]


def test_xrange_all_equals_explicit_range():
    assert xs.xrange_all("s") == xs.xrange("s", "-", "+")
    assert xs.xrevrange_all("s") == xs.xrevrange("s", "+", "-")


def test_xrevrange_variants():
    assert xs.xrevrange_all("s").args() == [b"XREVRANGE", b"s", b"+", b"-"]
    assert xs.xrevrange_count("s", "+", "-", 2).args() == [
        b"XREVRANGE", b"s", b"+", b"-", b"COUNT", b"2"
    ]


def test_xread_keys_then_ids():
    assert xs.xread(["k1", "k2"], ["0", "0"]).args() == [
        b"XREAD", b"STREAMS", b"k1", b"k2", b"0", b"0"
    ]


@pytest.mark.parametrize(
    "command, readonly",
    [
        (xs.xrange_all("s"), True),
        (xs.xlen("s"), True),
        (xs.xinfo_groups("s"), True),
        (xs.xadd("s", "*", [("f", "v")]), False),
        (xs.xdel("s", ["1-0"]), False),
    ],
)
def test_readonly_classification(command, readonly):
    assert is_readonly_cmd(command.args()[0]) is readonly


def test_unsupported_argument_type():
    with pytest.raises(TypeError):
        xs.xlen(object())