import pytest

from redcmd.cmd import is_readonly_cmd
from redcmd import sorted_sets as zs


def _count(items):
    return str(len(items)).encode("ascii")


def test_zadd_puts_score_before_member():
    assert zs.zadd("z", "m", 1.5).args() == [b"ZADD", b"z", b"1.5", b"m"]


def test_zadd_multiple_flattens_pairs():
    assert zs.zadd_multiple("z", [(1, "a"), (2, "b")]).args() == [
        b"ZADD", b"z", b"1", b"a", b"2", b"b",
    ]


def test_zincr_puts_delta_before_member():
    assert zs.zincr("z", "m", 5).args() == [b"ZINCRBY", b"z", b"5", b"m"]


@pytest.mark.parametrize(
    "builder, name, aggregate",
    [
        (zs.zinterstore, b"ZINTERSTORE", []),
        (zs.zinterstore_min, b"ZINTERSTORE", [b"AGGREGATE", b"MIN"]),
        (zs.zinterstore_max, b"ZINTERSTORE", [b"AGGREGATE", b"MAX"]),
        (zs.zunionstore, b"ZUNIONSTORE", []),
        (zs.zunionstore_min, b"ZUNIONSTORE", [b"AGGREGATE", b"MIN"]),
        (zs.zunionstore_max, b"ZUNIONSTORE", [b"AGGREGATE", b"MAX"]),
    ],
)
def test_store_commands_count_keys(builder, name, aggregate):
    keys = ["a", "b", "c"]
    assert builder("d", keys).args() == [
        name, b"d", _count(keys), b"a", b"b", b"c", *aggregate,
    ]


@pytest.mark.parametrize(
    "builder, name, aggregate",
    [
        (zs.zinterstore_weights, b"ZINTERSTORE", []),
        (zs.zinterstore_min_weights, b"ZINTERSTORE", [b"AGGREGATE", b"MIN"]),
        (zs.zinterstore_max_weights, b"ZINTERSTORE", [b"AGGREGATE", b"MAX"]),
        (zs.zunionstore_weights, b"ZUNIONSTORE", []),
        (zs.zunionstore_min_weights, b"ZUNIONSTORE", [b"AGGREGATE", b"MIN"]),
        (zs.zunionstore_max_weights, b"ZUNIONSTORE", [b"AGGREGATE", b"MAX"]),
    ],
)
def test_weighted_store_commands(builder, name, aggregate):
    pairs = [("a", 1), ("b", 2)]
    assert builder("d", pairs).args() == [
        name, b"d", _count(pairs), b"a", b"b", *aggregate, b"WEIGHTS", b"1", b"2",
    ]


def test_store_rejects_plain_string_keys():
    with pytest.raises(TypeError):
        zs.zinterstore("d", "abc")


def test_weights_reject_non_pairs():
    with pytest.raises(TypeError):
        zs.zunionstore_weights("d", ["a", "b"])


def test_zmpop():
    keys = ["a", "b"]
    assert zs.zmpop_max(keys, 3).args() == [
        b"ZMPOP", _count(keys), b"a", b"b", b"MAX", b"COUNT", b"3",
    ]
    assert zs.zmpop_min(keys, 3).args()[4] == b"MIN"


def test_zpop():
    assert zs.zpopmax("z", 2).args() == [b"ZPOPMAX", b"z", b"2"]
    assert zs.zpopmin("z", 2).args() == [b"ZPOPMIN", b"z", b"2"]


def test_zrandmember_optional_count():
    assert zs.zrandmember("z", None).args() == [b"ZRANDMEMBER", b"z"]
    assert zs.zrandmember("z", -4).args() == [b"ZRANDMEMBER", b"z", b"-4"]
    assert zs.zrandmember_withscores("z", 4).args() == [
        b"ZRANDMEMBER", b"z", b"4", b"WITHSCORES",
    ]


def test_index_ranges():
    assert zs.zrange("z", 0, -1).args() == [b"ZRANGE", b"z", b"0", b"-1"]
    assert zs.zrange_withscores("z", 0, -1).args()[-1] == b"WITHSCORES"
    assert zs.zrevrange("z", 0, 5).args() == [b"ZREVRANGE", b"z", b"0", b"5"]
    assert zs.zrevrange_withscores("z", 0, 5).args()[-1] == b"WITHSCORES"
    assert zs.zremrangebyrank("z", 1, 2).args() == [b"ZREMRANGEBYRANK", b"z", b"1", b"2"]


def test_index_ranges_reject_non_integers():
    with pytest.raises(ValueError):
        zs.zrange("z", "0", 1)
    with pytest.raises(ValueError):
        zs.zpopmax("z", True)


def test_score_ranges():
    assert zs.zrangebyscore("z", "-inf", "+inf").args() == [
        b"ZRANGEBYSCORE", b"z", b"-inf", b"+inf",
    ]
    assert zs.zrangebyscore_withscores("z", 1, 2).args() == [
        b"ZRANGEBYSCORE", b"z", b"1", b"2", b"WITHSCORES",
    ]
    assert zs.zrangebyscore_limit("z", 1, 2, 0, 10).args() == [
        b"ZRANGEBYSCORE", b"z", b"1", b"2", b"LIMIT", b"0", b"10",
    ]
    assert zs.zrangebyscore_limit_withscores("z", 1, 2, 0, 10).args() == [
        b"ZRANGEBYSCORE", b"z", b"1", b"2", b"WITHSCORES", b"LIMIT", b"0", b"10",
    ]


def test_reverse_score_ranges_keep_max_first():
    assert zs.zrevrangebyscore("z", 9, 1).args() == [b"ZREVRANGEBYSCORE", b"z", b"9", b"1"]
    assert zs.zrevrangebyscore_withscores("z", 9, 1).args()[-1] == b"WITHSCORES"
    assert zs.zrevrangebyscore_limit("z", 9, 1, 2, 3).args() == [
        b"ZREVRANGEBYSCORE", b"z", b"9", b"1", b"LIMIT", b"2", b"3",
    ]
    assert zs.zrevrangebyscore_limit_withscores("z", 9, 1, 2, 3).args() == [
        b"ZREVRANGEBYSCORE", b"z", b"9", b"1", b"WITHSCORES", b"LIMIT", b"2", b"3",
    ]


def test_lex_ranges():
    assert zs.zrangebylex("z", "-", "+").args() == [b"ZRANGEBYLEX", b"z", b"-", b"+"]
    assert zs.zrangebylex_limit("z", "[a", "[c", 1, 2).args() == [
        b"ZRANGEBYLEX", b"z", b"[a", b"[c", b"LIMIT", b"1", b"2",
    ]
    assert zs.zrevrangebylex("z", "+", "-").args() == [b"ZREVRANGEBYLEX", b"z", b"+", b"-"]
    assert zs.zrevrangebylex_limit("z", "+", "-", 0, 1).args()[-3:] == [
        b"LIMIT", b"0", b"1",
    ]
    assert zs.zlexcount("z", "-", "+").args() == [b"ZLEXCOUNT", b"z", b"-", b"+"]
    assert zs.zrembylex("z", "[a", "[b").args() == [b"ZREMRANGEBYLEX", b"z", b"[a", b"[b"]


def test_limit_rejects_non_integer_offset():
    with pytest.raises(ValueError):
        zs.zrangebyscore_limit("z", 1, 2, 1.5, 10)


def test_member_queries():
    assert zs.zrank("z", "m").args() == [b"ZRANK", b"z", b"m"]
    assert zs.zrevrank("z", "m").args() == [b"ZREVRANK", b"z", b"m"]
    assert zs.zscore("z", "m").args() == [b"ZSCORE", b"z", b"m"]
    assert zs.zscore_multiple("z", ["a", "b"]).args() == [b"ZMSCORE", b"z", b"a", b"b"]
    assert zs.zrem("z", ["a", "b"]).args() == [b"ZREM", b"z", b"a", b"b"]
    assert zs.zrembyscore("z", 0, 5).args() == [b"ZREMRANGEBYSCORE", b"z", b"0", b"5"]
    assert zs.zcount("z", 0, 5).args() == [b"ZCOUNT", b"z", b"0", b"5"]
    assert zs.zcard("z").args() == [b"ZCARD", b"z"]


def test_zscan():
    command = zs.zscan_match("z", "p*")
    assert command.args() == [b"ZSCAN", b"z", b"0", b"MATCH", b"p*"]
    assert zs.zscan("z").cursor == 0


def test_readonly_classification():
    assert is_readonly_cmd(zs.zrange("z", 0, 1).args()[0])
    assert not is_readonly_cmd(zs.zadd("z", "m", 1).args()[0])