# redcmd

`redcmd` builds Redis commands as plain Python objects. Each helper returns a
`Cmd` holding the command name and its arguments, encoded as bytes the way
they go over the wire. Nothing here opens a connection: take `Cmd.args()` and
hand it to whatever transport you use.

## Installation

```
pip install redcmd
```

## Building commands

```python
from redcmd.keyspace import get, set, incr
from redcmd.cmd import cmd

set("greeting", "hello").args()
# [b"SET", b"greeting", b"hello"]

get(["a", "b"]).args()
# [b"MGET", b"a", b"b"]   -- several keys turn GET into MGET

incr("counter", 1.5).args()
# [b"INCRBYFLOAT", b"counter", b"1.5"]

cmd("PING").arg("hi").args()
# [b"PING", b"hi"]
```

Values become arguments through `redcmd.cmd.to_redis_args`:

- `None` adds nothing;
- `str` is encoded as UTF-8, `bytes`/`bytearray`/`memoryview` are kept as is;
- `bool` becomes `b"1"` or `b"0"`, `int` is written in decimal, `float` with
  `repr()`;
- lists, tuples and sets are flattened, mappings are flattened into
  key, value, key, value ...;
- any object with a `to_redis_args()` method encodes itself;
- anything else raises `TypeError`.

`is_single_arg` tells whether a value encodes to exactly one argument (this is
how `get`, `hget` and `json_get` choose between the single and multi-key
forms), and `describe_numeric_behavior` returns a `NumericBehavior` member
(this is how `incr` and `hincr` pick the float variant).

`is_readonly_cmd(name)` reports whether a command name, in upper case, is one
of the read-only commands.

Builders check their integer arguments: counts, offsets and timeouts that
must be non-negative raise `ValueError` otherwise, and enum-typed arguments
such as `Direction` or `Unit` raise `TypeError` when given anything else.

## Options

```python
from redcmd.options import Direction, Expiry, ExpiryKind, LposOptions
from redcmd.lists import lpos, lmove
from redcmd.keyspace import get_ex

lpos("mylist", "x", LposOptions().count(2).rank(-1)).args()
# [b"LPOS", b"mylist", b"x", b"COUNT", b"2", b"RANK", b"-1"]

lmove("src", "dst", Direction.LEFT, Direction.RIGHT).args()
# [b"LMOVE", b"src", b"dst", b"LEFT", b"RIGHT"]

get_ex("k", Expiry(ExpiryKind.EX, 10)).args()
# [b"GETEX", b"k", b"EX", b"10"]
```

`LposOptions` is immutable; `count`, `rank` and `maxlen` each return a new
instance. `Expiry(ExpiryKind.PERSIST)` takes no time value.

## Geospatial

```python
from redcmd.geo import (
    Coord, RadiusOptions, RadiusOrder, RadiusSearchResult, Unit,
    geo_add, geo_radius,
)

geo_add("sicily", [Coord.lon_lat(13.361389, 38.115556), "Palermo"]).args()
# [b"GEOADD", b"sicily", b"13.361389", b"38.115556", b"Palermo"]

opts = RadiusOptions().with_dist().order(RadiusOrder.ASC).limit(5)
geo_radius("sicily", 15.0, 37.0, 200, Unit.KILOMETERS, opts).args()
# [b"GEORADIUS", b"sicily", b"15.0", b"37.0", b"200.0", b"km",
#  b"WITHDIST", b"COUNT", b"5", b"ASC"]

Coord.from_redis_value([b"13.36", b"38.11"])
# Coord(longitude=13.36, latitude=38.11)

RadiusSearchResult.from_redis_value([b"Palermo", b"190.44"])
# RadiusSearchResult(name='Palermo', coord=None, dist=190.44)
```

`RadiusOptions` also offers `with_coord`, `store` and `store_dist`. Reply
parsing raises `TypeError` when a value has the wrong shape.

## Scanning

`scan`, `scan_match`, `hscan`, `sscan`, `zscan` and their `*_match` forms
build the command with a cursor slot set to 0. Set `command.cursor` to the
cursor from the previous reply and call `args()` again to get the next page:

```python
from redcmd.keyspace import scan_match

c = scan_match("user:*")
c.args()   # [b"SCAN", b"0", b"MATCH", b"user:*"]
c.cursor = 17
c.args()   # [b"SCAN", b"17", b"MATCH", b"user:*"]
```

## JSON documents

The `redcmd.json_commands` builders serialise values with the standard
`json` module, compactly and without NaN or infinity:

```python
from redcmd.json_commands import json_set, json_get

json_set("doc", "$", {"item": 42}).args()
# [b"JSON.SET", b"doc", b"$", b'{"item":42}']

json_get(["a", "b"], "$").args()
# [b"JSON.MGET", b"a", b"b", b"$"]
```

## Pipelines

```python
from redcmd.cmd import Pipeline
from redcmd.hashes import hset, hgetall

pipe = Pipeline()
pipe.add_command(hset("user", "name", "ada")).add_command(hgetall("user"))
[c.args() for c in pipe]
```

`Pipeline.commands()` returns the queued commands as a tuple; `len(pipe)`
gives their number.

## Modules

- `redcmd.cmd` – `Cmd`, `cmd`, `Pipeline`, `NumericBehavior`, argument
  encoding helpers, `is_readonly_cmd`
- `redcmd.options` – `Direction`, `LposOptions`, `Expiry`, `ExpiryKind`
- `redcmd.keyspace` – keys, strings, bits, `OBJECT`, `PUBLISH`, `SCAN`
  (`delete` builds `DEL`; `set_multiple` is a deprecated alias of `mset`)
- `redcmd.hashes`, `redcmd.lists`, `redcmd.sets` (with HyperLogLog),
  `redcmd.sorted_sets` – data-type commands
- `redcmd.geo` – geospatial commands, options and reply types
- `redcmd.stream_commands` – stream commands
- `redcmd.acl_commands` – ACL commands
- `redcmd.json_commands` – JSON document commands

## What this package does not do

It only builds commands. It does not connect to a server, send commands,
read or decode replies (apart from the two geo reply types above), iterate
scans for you, or subscribe to pub/sub channels.

## Running the tests

```
pip install -e ".[test]"
pytest
```