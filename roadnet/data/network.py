"""Road network module."""
from typing import Dict, Iterator, List, Optional, Tuple

import networkx as nx
import pandas as pd

from .geopoint import GeoPoint
from .segment import Arc, LengthMeters, SpeedMps, TravelTime, travel_time
from ..errors import DanglingReferenceError


class RoadNetwork:
    """Undirected road graph with travel times (in seconds) on the arcs.

    Nodes are identified by their OSM ids from the outside. Each node taking
    part in at least one arc gets a dense internal index in the order in
    which it was first connected; `adjacent_arcs` is addressed by that index.
    """

    def __init__(self):
        # OSM id -> internal index, only for the nodes with arcs
        self.osm_id_map: Dict[int, int] = {}
        # OSM id -> location, for all the declared nodes
        self.nodes: Dict[int, GeoPoint] = {}
        self.adjacent_arcs: List[List[Arc]] = []

    @classmethod
    def from_osm_file(cls, path, on_dangling: str = "fail") -> "RoadNetwork":
        from ..osm.reader import read_osm_file

        network = cls()
        read_osm_file(network, path, on_dangling=on_dangling)
        return network

    def __len__(self):
        return len(self.adjacent_arcs)

    @property
    def node_count(self) -> int:
        return len(self.adjacent_arcs)

    @property
    def arc_count(self) -> int:
        return sum(len(arcs) for arcs in self.adjacent_arcs)

    def add_node(self, osm_id: int, location: GeoPoint):
        # a repeated declaration overwrites the former location
        self.nodes[osm_id] = location

    def get_index(self, osm_id: int) -> Optional[int]:
        return self.osm_id_map.get(osm_id)

    def get_or_create_index(self, osm_id: int) -> int:
        index = self.get_index(osm_id)
        if index is None:
            index = len(self.adjacent_arcs)
            self.adjacent_arcs.append([])
            self.osm_id_map[osm_id] = index
        return index

    def location(self, osm_id: int) -> GeoPoint:
        try:
            return self.nodes[osm_id]
        except KeyError:
            raise DanglingReferenceError(osm_id) from None

    def distance(self, osm_id_a: int, osm_id_b: int) -> LengthMeters:
        return self.location(osm_id_a) - self.location(osm_id_b)

    def add_arc(self, osm_id_a: int, osm_id_b: int, speed: SpeedMps) -> TravelTime:
        """Connect the two nodes in both directions.

        Both nodes must have been declared before, otherwise
        `DanglingReferenceError` is raised and the network stays untouched.
        """
        cost = travel_time(self.distance(osm_id_a, osm_id_b), speed)
        index_a = self.get_or_create_index(osm_id_a)
        index_b = self.get_or_create_index(osm_id_b)
        self.adjacent_arcs[index_a].append(Arc(index_b, cost))
        self.adjacent_arcs[index_b].append(Arc(index_a, cost))
        return cost

    def osm_ids(self) -> List[int]:
        """OSM ids ordered by the internal index."""
        ids = [0] * len(self.adjacent_arcs)
        for osm_id, index in self.osm_id_map.items():
            ids[index] = osm_id
        return ids

    def neighbours(self, osm_id: int) -> List[Tuple[int, TravelTime]]:
        index = self.get_index(osm_id)
        if index is None:
            return []
        osm_ids = self.osm_ids()
        return [(osm_ids[arc.index], arc.cost) for arc in self.adjacent_arcs[index]]

    def arcs(self) -> Iterator[Tuple[int, Arc]]:
        for index_from, arcs in enumerate(self.adjacent_arcs):
            for arc in arcs:
                yield index_from, arc

    def to_networkx(self) -> nx.Graph:
        """Graph keyed by the internal index for external route solvers.

        Nodes carry the OSM id, the coordinates and a shapely `geometry`.

        Parallel arcs between the same two nodes (e.g. two ways sharing a
        stretch) collapse into one edge keeping the lowest travel time.
        """
        graph = nx.Graph()
        for osm_id, index in self.osm_id_map.items():
            location = self.nodes[osm_id]
            graph.add_node(index, osm_id=osm_id, lat=location.lat, lon=location.lon, geometry=location.point())
        for index_from, arc in self.arcs():
            data = graph.get_edge_data(index_from, arc.index)
            if data is None or arc.cost < data["travel_time"]:
                graph.add_edge(index_from, arc.index, travel_time=arc.cost)
        return graph

    def to_dataframe(self) -> pd.DataFrame:
        """One row per arc, both directions included."""
        osm_ids = self.osm_ids()
        rows = [(index_from, arc.index, osm_ids[index_from], osm_ids[arc.index], arc.cost)
                for index_from, arc in self.arcs()]
        return pd.DataFrame(rows, columns=["index_from", "index_to", "osm_id_from", "osm_id_to", "travel_time"])
