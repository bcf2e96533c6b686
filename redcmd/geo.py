"""Geospatial option types, reply parsing and GEO* command builders."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any

from .cmd import Cmd, cmd, to_redis_args

_INCOMPATIBLE = "Response was of incompatible type"


class Unit(enum.Enum):
    """Distance units accepted by GEODIST and GEORADIUS."""

    METERS = b"m"
    KILOMETERS = b"km"
    MILES = b"mi"
    FEET = b"ft"

    def to_redis_args(self) -> list[bytes]:
        return [self.value]


def _as_float(value: Any) -> float:
    """Read a reply item as a float, raising TypeError when it is not one."""
    if isinstance(value, bool):
        raise TypeError(f"{_INCOMPATIBLE}: {value!r} is not a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TypeError(f"{_INCOMPATIBLE}: {value!r} is not a number") from exc
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError as exc:
            raise TypeError(f"{_INCOMPATIBLE}: {value!r} is not a number") from exc
    raise TypeError(f"{_INCOMPATIBLE}: {value!r} is not a number")


def _as_string(value: Any) -> str:
    """Read a reply item as text, raising TypeError when it is not text."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TypeError(f"{_INCOMPATIBLE}: {value!r} is not valid UTF-8") from exc
    raise TypeError(f"{_INCOMPATIBLE}: {value!r} is not a string")


@dataclass(frozen=True)
class Coord:
    """A (longitude, latitude) position."""

    longitude: Any
    latitude: Any

    @classmethod
    def lon_lat(cls, longitude: Any, latitude: Any) -> Coord:
        """Build a coordinate from longitude and latitude."""
        return cls(longitude, latitude)

    @classmethod
    def from_redis_value(cls, value: Any) -> Coord:
        """Parse a two-element reply into a coordinate of floats."""
        if not isinstance(value, (list, tuple)):
            raise TypeError(
                f"{_INCOMPATIBLE}: Expect a pair of numbers (response was {value!r})"
            )
        numbers = [_as_float(item) for item in value]
        if len(numbers) != 2:
            raise TypeError(
                f"{_INCOMPATIBLE}: Expect a pair of numbers (response was {value!r})"
            )
        longitude, latitude = numbers
        return cls(longitude, latitude)

    def to_redis_args(self) -> list[bytes]:
        return [*to_redis_args(self.longitude), *to_redis_args(self.latitude)]

    def is_single_arg(self) -> bool:
        return False


class RadiusOrder(enum.Enum):
    """Sort order of GEORADIUS results."""

    UNSORTED = "unsorted"
    ASC = "asc"
    DESC = "desc"


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError("limit must be a non-negative integer")


@dataclass(frozen=True)
class RadiusOptions:
    """Options for GEORADIUS and GEORADIUSBYMEMBER; setters return new instances."""

    _with_coord: bool = False
    _with_dist: bool = False
    _count: int | None = None
    _order: RadiusOrder = RadiusOrder.UNSORTED
    _store: tuple[bytes, ...] | None = None
    _store_dist: tuple[bytes, ...] | None = None

    def limit(self, n: int) -> RadiusOptions:
        """Limit the results to the first ``n`` matching items."""
        _check_count(n)
        return replace(self, _count=n)

    def with_dist(self) -> RadiusOptions:
        """Return the distance of each item from the center."""
        return replace(self, _with_dist=True)

    def with_coord(self) -> RadiusOptions:
        """Return the coordinates of each item."""
        return replace(self, _with_coord=True)

    def order(self, o: RadiusOrder) -> RadiusOptions:
        """Sort the returned items."""
        if not isinstance(o, RadiusOrder):
            raise TypeError("order must be a RadiusOrder")
        return replace(self, _order=o)

    def store(self, key: Any) -> RadiusOptions:
        """Store the results in a sorted set at ``key`` instead of returning them."""
        return replace(self, _store=tuple(to_redis_args(key)))

    def store_dist(self, key: Any) -> RadiusOptions:
        """Store the results at ``key`` scored by their distance from the center."""
        return replace(self, _store_dist=tuple(to_redis_args(key)))

    def to_redis_args(self) -> list[bytes]:
        out: list[bytes] = []
        if self._with_coord:
            out.append(b"WITHCOORD")
        if self._with_dist:
            out.append(b"WITHDIST")
        if self._count is not None:
            out += [b"COUNT", str(self._count).encode("ascii")]
        if self._order is RadiusOrder.ASC:
            out.append(b"ASC")
        elif self._order is RadiusOrder.DESC:
            out.append(b"DESC")
        if self._store is not None:
            out += [b"STORE", *self._store]
        if self._store_dist is not None:
            out += [b"STOREDIST", *self._store_dist]
        return out

    def is_single_arg(self) -> bool:
        return False


@dataclass(frozen=True)
class RadiusSearchResult:
    """One item of a GEORADIUS reply."""

    name: str
    coord: Coord | None = None
    dist: float | None = None

    @classmethod
    def from_redis_value(cls, value: Any) -> RadiusSearchResult:
        """Parse either a bare member name or a ``[name, dist?, coord?]`` list."""
        try:
            return cls(_as_string(value))
        except TypeError:
            pass
        if isinstance(value, (list, tuple)):
            result = cls._parse_multi_values(value)
            if result is not None:
                return result
        raise TypeError(
            f"{_INCOMPATIBLE}: Response type not RadiusSearchResult compatible. "
            f"(response was {value!r})"
        )

    @classmethod
    def _parse_multi_values(cls, items: Any) -> RadiusSearchResult | None:
        remaining = iter(items)
        try:
            name = _as_string(next(remaining))
        except (StopIteration, TypeError):
            return None

        current = next(remaining, None)
        dist = None
        if current is not None:
            try:
                dist = _as_float(current)
            except TypeError:
                pass
            else:
                current = next(remaining, None)

        coord = None
        if current is not None:
            try:
                coord = Coord.from_redis_value(current)
            except TypeError:
                coord = None
        return cls(name, coord, dist)


def _check_unit(unit: Any) -> None:
    if not isinstance(unit, Unit):
        raise TypeError("unit must be a Unit")


def geo_add(key: Any, members: Any) -> Cmd:
    """GEOADD: add ``(longitude, latitude, name)`` members to ``key``."""
    return cmd("GEOADD").arg(key).arg(members)


def geo_dist(key: Any, member1: Any, member2: Any, unit: Unit) -> Cmd:
    """GEODIST: distance between two members."""
    _check_unit(unit)
    return cmd("GEODIST").arg(key).arg(member1).arg(member2).arg(unit)


def geo_hash(key: Any, members: Any) -> Cmd:
    """GEOHASH: geohash strings of one or more members."""
    return cmd("GEOHASH").arg(key).arg(members)


def geo_pos(key: Any, members: Any) -> Cmd:
    """GEOPOS: positions of one or more members."""
    return cmd("GEOPOS").arg(key).arg(members)


def geo_radius(
    key: Any,
    longitude: float,
    latitude: float,
    radius: float,
    unit: Unit,
    options: RadiusOptions,
) -> Cmd:
    """GEORADIUS: members within ``radius`` of a point."""
    _check_unit(unit)
    if not isinstance(options, RadiusOptions):
        raise TypeError("options must be RadiusOptions")
    return (
        cmd("GEORADIUS")
        .arg(key)
        .arg(float(longitude))
        .arg(float(latitude))
        .arg(float(radius))
        .arg(unit)
        .arg(options)
    )


def geo_radius_by_member(
    key: Any, member: Any, radius: float, unit: Unit, options: RadiusOptions
) -> Cmd:
    """GEORADIUSBYMEMBER: members within ``radius`` of another member."""
    _check_unit(unit)
    if not isinstance(options, RadiusOptions):
        raise TypeError("options must be RadiusOptions")
    return (
        cmd("GEORADIUSBYMEMBER")
        .arg(key)
        .arg(member)
        .arg(float(radius))
        .arg(unit)
        .arg(options)
    )