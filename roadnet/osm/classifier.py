"""Classification of single lines of an OSM XML export.

Only a shallow subset of the format is recognized, each line on its own:

    <node id="1" lat="49.0" lon="6.0" .../>    -> NodeDeclared
    <way id="10">                              -> WayStart
      <nd ref="1"/>                            -> WayNodeRef
      <tag k="highway" v="residential"/>       -> HighwayTag
    </way>                                     -> WayEnd
"""
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from ..errors import OsmParseError

NODE_RE = re.compile(r'id="(\d+)" lat="([0-9.]+)" lon="([0-9.]+)"')
WAY_START = "<way "
WAY_END = "</way"
ND_RE = re.compile(r'<nd ref="(\d+)"')
HIGHWAY_RE = re.compile(r'k="highway" v="([a-z_]+)"')


@dataclass(frozen=True)
class NodeDeclared:
    osm_id: int
    lat: float
    lon: float


@dataclass(frozen=True)
class WayStart:
    pass


@dataclass(frozen=True)
class WayNodeRef:
    osm_id: int


@dataclass(frozen=True)
class HighwayTag:
    category: str


@dataclass(frozen=True)
class WayEnd:
    pass


OsmEvent = Union[NodeDeclared, WayStart, WayNodeRef, HighwayTag, WayEnd]


def _parse_number(kind, value: str, field: str, line: str):
    try:
        return kind(value)
    except ValueError as e:
        raise OsmParseError(f"Invalid {field} '{value}'", line) from e


def _match_node(line: str) -> Optional[OsmEvent]:
    m = NODE_RE.search(line)
    if m is None:
        return None
    return NodeDeclared(
        osm_id=_parse_number(int, m.group(1), "node id", line),
        lat=_parse_number(float, m.group(2), "latitude", line),
        lon=_parse_number(float, m.group(3), "longitude", line),
    )


def _match_way_start(line: str) -> Optional[OsmEvent]:
    return WayStart() if line.startswith(WAY_START) else None


def _match_nd(line: str) -> Optional[OsmEvent]:
    m = ND_RE.search(line)
    if m is None:
        return None
    return WayNodeRef(_parse_number(int, m.group(1), "node reference", line))


def _match_highway(line: str) -> Optional[OsmEvent]:
    m = HIGHWAY_RE.search(line)
    return HighwayTag(m.group(1)) if m is not None else None


def _match_way_end(line: str) -> Optional[OsmEvent]:
    return WayEnd() if line.startswith(WAY_END) else None


# Tried in order, the first match wins.
MATCHERS: List[Callable[[str], Optional[OsmEvent]]] = [
    _match_node,
    _match_way_start,
    _match_nd,
    _match_highway,
    _match_way_end,
]


def classify_line(line: str) -> Optional[OsmEvent]:
    """Return the event encoded by the line or `None` if the line is not recognized."""
    trimmed = line.lstrip()
    for matcher in MATCHERS:
        event = matcher(trimmed)
        if event is not None:
            return event
    return None
