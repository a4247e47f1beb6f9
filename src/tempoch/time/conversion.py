"""Conversion graph between time scales, routed through the Julian Date hub.

Direct edges are plain functions on raw values. A pair without a direct edge is converted in
exactly two hops, ``source -> JD -> target``, and converting a scale to itself never touches a
value.
"""

from __future__ import annotations

# Standard Library Imports
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType

# Local Imports
from ..common.labels import TimeScale
from ..engine import api, transforms
from .descriptors import JULIAN_DATE_BIJECTIONS

Edge = tuple[TimeScale, TimeScale]
EdgeFunction = Callable[[float], float]


class ConversionGraphError(Exception):
    """Error thrown when a conversion table can't route every supported pair."""


def _identity(value: float) -> float:
    return value


def _mjdToTT(mjd: float) -> float:
    return transforms.jdToTT(api.mjdToJD(mjd))


def _mjdToTAI(mjd: float) -> float:
    return transforms.jdToTAI(api.mjdToJD(mjd))


def _mjdToTDB(mjd: float) -> float:
    return transforms.jdToTDB(api.mjdToJD(mjd))


def _defaultEdges() -> dict[Edge, EdgeFunction]:
    edges: dict[Edge, EdgeFunction] = {
        (TimeScale.JD, TimeScale.MJD): api.jdToMJD,
        (TimeScale.MJD, TimeScale.JD): api.mjdToJD,
        # UTC is stored as MJD
        (TimeScale.JD, TimeScale.UTC): api.jdToMJD,
        (TimeScale.UTC, TimeScale.JD): api.mjdToJD,
        (TimeScale.MJD, TimeScale.UTC): _identity,
        (TimeScale.UTC, TimeScale.MJD): _identity,
        (TimeScale.MJD, TimeScale.TT): _mjdToTT,
        (TimeScale.MJD, TimeScale.TAI): _mjdToTAI,
        (TimeScale.MJD, TimeScale.TDB): _mjdToTDB,
    }
    for scale, (to_jd, from_jd) in JULIAN_DATE_BIJECTIONS.items():
        edges[(scale, TimeScale.JD)] = to_jd
        edges[(TimeScale.JD, scale)] = from_jd
    return edges


class ConversionGraph:
    """Explicit ``(source, target)`` edge table with a hub fallback."""

    def __init__(
        self,
        edges: Mapping[Edge, EdgeFunction],
        hub: TimeScale = TimeScale.JD,
        scales: Iterable[TimeScale] = tuple(TimeScale),
    ):
        """Validate and freeze the edge table.

        Args:
            edges (``Mapping``): conversion function of each direct ``(source, target)`` pair
            hub (:class:`.TimeScale`, optional): scale every other scale must reach directly.
                Defaults to Julian Date.
            scales (``Iterable``, optional): scales the graph must route. Defaults to every
                :class:`.TimeScale`.

        Raises:
            ConversionGraphError: if an edge is malformed or a scale lacks an edge to or from the hub
        """
        self._hub = hub
        self._scales = frozenset(scales)
        self._edges: Mapping[Edge, EdgeFunction] = MappingProxyType(dict(edges))
        self._validate()

    def _validate(self) -> None:
        if self._hub not in self._scales:
            raise ConversionGraphError(f"Hub {self._hub!r} is not one of the routed scales")

        for (source, target), function in self._edges.items():
            if source == target:
                raise ConversionGraphError(f"Identity edge for {source!r} must not be tabulated")
            if source not in self._scales or target not in self._scales:
                raise ConversionGraphError(f"Edge {source!r} -> {target!r} uses an unrouted scale")
            if not callable(function):
                raise ConversionGraphError(f"Edge {source!r} -> {target!r} is not callable")

        for scale in self._scales - {self._hub}:
            for edge in ((scale, self._hub), (self._hub, scale)):
                if edge not in self._edges:
                    raise ConversionGraphError(f"Missing hub edge {edge[0]!r} -> {edge[1]!r}")

    @property
    def hub(self) -> TimeScale:
        """:class:`.TimeScale`: scale every two-hop route passes through."""
        return self._hub

    @property
    def edges(self) -> Mapping[Edge, EdgeFunction]:
        """``Mapping``: read-only view of the direct edges."""
        return self._edges

    def hasEdge(self, source: TimeScale, target: TimeScale) -> bool:
        """Return whether `source` converts to `target` in a single hop."""
        return (source, target) in self._edges

    def route(self, source: TimeScale, target: TimeScale) -> list[Edge]:
        """Return the hops converting `source` to `target`.

        Raises:
            KeyError: if either scale isn't routed by this graph
        """
        for scale in (source, target):
            if scale not in self._scales:
                raise KeyError(f"Scale {scale!r} is not routed by this conversion graph")

        if source == target:
            return []
        if (source, target) in self._edges:
            return [(source, target)]
        return [(source, self._hub), (self._hub, target)]

    def convert(self, value: float, source: TimeScale, target: TimeScale) -> float:
        """Convert a raw `value` on `source` to the raw value on `target`."""
        for edge in self.route(source, target):
            value = self._edges[edge](value)
        return value


CONVERSION_GRAPH = ConversionGraph(_defaultEdges())
""":class:`.ConversionGraph`: process-wide graph over every supported scale."""


def route(source: TimeScale, target: TimeScale) -> list[Edge]:
    """Return the hops :data:`.CONVERSION_GRAPH` takes from `source` to `target`."""
    return CONVERSION_GRAPH.route(source, target)


def convert(value: float, source: TimeScale, target: TimeScale) -> float:
    """Convert a raw `value` between two scales with :data:`.CONVERSION_GRAPH`."""
    return CONVERSION_GRAPH.convert(value, source, target)
