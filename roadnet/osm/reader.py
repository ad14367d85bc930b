"""Single pass construction of a road network from an OSM XML export."""
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Tuple, Union

from .classifier import HighwayTag, NodeDeclared, OsmEvent, WayEnd, WayNodeRef, WayStart, classify_line
from ..data.geopoint import GeoPoint
from ..data.network import RoadNetwork
from ..data.segment import SpeedMps, highway_speed
from ..errors import DanglingReferenceError, MapFileError, OsmParseError
from ..utils import is_root_debug_logging

logger = logging.getLogger(__name__)

ON_DANGLING = ("fail", "skip")


@dataclass(frozen=True)
class WayState:
    in_way: bool = False
    # OSM ids of the way nodes in the order of declaration
    hops: Tuple[int, ...] = ()
    is_highway: bool = False
    speed: SpeedMps = SpeedMps(0.0)

    @property
    def usable(self) -> bool:
        return self.in_way and self.is_highway and self.speed > 0


IDLE = WayState()
OPEN_WAY = WayState(in_way=True)


def close_way(state: WayState, network: RoadNetwork, on_dangling: str = "fail") -> int:
    """Connect the consecutive nodes of a usable way. Returns the number of added edges."""
    if not state.usable:
        return 0
    added = 0
    for previous, current in zip(state.hops, state.hops[1:]):
        try:
            network.add_arc(current, previous, state.speed)
        except DanglingReferenceError as e:
            if on_dangling != "skip":
                raise
            logger.warning(f"Skipping edge {previous}-{current}: {e}")
            continue
        added += 1
    return added


def step(state: WayState, event: OsmEvent, network: RoadNetwork, on_dangling: str = "fail") -> WayState:
    """Apply one event to the network and return the following state."""
    if isinstance(event, NodeDeclared):
        network.add_node(event.osm_id, GeoPoint(event.lat, event.lon))
        return state
    if isinstance(event, WayStart):
        return OPEN_WAY
    if not state.in_way:
        # way content outside of a way
        return state
    if isinstance(event, WayNodeRef):
        return replace(state, hops=state.hops + (event.osm_id,))
    if isinstance(event, HighwayTag):
        speed = highway_speed(event.category)
        if speed is None:
            return replace(state, is_highway=False, speed=SpeedMps(0.0))
        return replace(state, is_highway=True, speed=speed)
    if isinstance(event, WayEnd):
        close_way(state, network, on_dangling)
        return IDLE
    raise TypeError(f"Unknown event: {event!r}")


def read_osm_lines(network: RoadNetwork, lines: Iterable[str], on_dangling: str = "fail") -> RoadNetwork:
    """Feed the lines of an OSM export into the network.

    A way which is not closed before the input ends adds no edges.
    """
    if on_dangling not in ON_DANGLING:
        raise ValueError(f"Invalid dangling reference policy: '{on_dangling}'."
                         f" Allowed values are: {', '.join(ON_DANGLING)}.")

    debug = is_root_debug_logging()
    state = IDLE
    for line_no, line in enumerate(lines, start=1):
        try:
            event = classify_line(line)
            if event is None:
                continue
            if debug:
                logger.debug(f"{line_no}: {event}")
            state = step(state, event, network, on_dangling)
        except (OsmParseError, DanglingReferenceError) as e:
            e.line_no = line_no
            raise

    if state.in_way:
        logger.warning(f"The input ended inside a way with {len(state.hops)} nodes, the way is dropped.")
    return network


def _decoded_lines(f, path):
    for line_no, raw in enumerate(f, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug(f"{path}:{line_no}: not a valid UTF-8 line, skipped.")
            # keep the numbering of the following lines
            yield ""


def read_osm_file(network: RoadNetwork, path: Union[str, Path], on_dangling: str = "fail") -> RoadNetwork:
    logger.info(f"Loading road network from '{path}'.")
    try:
        f = open(path, "rb")
    except OSError as e:
        raise MapFileError(str(path), e.strerror or str(e)) from e

    with f:
        try:
            read_osm_lines(network, _decoded_lines(f, path), on_dangling)
        except OSError as e:
            raise MapFileError(str(path), e.strerror or str(e)) from e

    logger.info(f"Road network loaded: {len(network.nodes)} declared nodes, "
                f"{network.node_count} connected nodes, {network.arc_count} arcs.")
    return network
