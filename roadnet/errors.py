"""Errors raised while building a road network."""

from typing import Optional


class RoadNetworkError(Exception):
    """Base class of all the road network errors."""


class MapFileError(RoadNetworkError):
    """The map file cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read map file '{path}': {reason}")
        self.path = path
        self.reason = reason


class OsmParseError(RoadNetworkError, ValueError):
    """A recognized line carries a field which is not a valid number."""

    def __init__(self, message: str, line: str, line_no: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_no = line_no

    def __str__(self):
        if self.line_no is None:
            return f"{self.message}: '{self.line}'"
        return f"line {self.line_no}: {self.message}: '{self.line}'"


class DanglingReferenceError(RoadNetworkError, KeyError):
    """An arc refers to a node whose coordinates were never declared."""

    def __init__(self, osm_id: int, line_no: Optional[int] = None):
        super().__init__(osm_id)
        self.osm_id = osm_id
        self.line_no = line_no

    def __str__(self):
        msg = f"Node {self.osm_id} is referenced by a way but its location was never declared."
        if self.line_no is not None:
            msg = f"line {self.line_no}: {msg}"
        return msg
