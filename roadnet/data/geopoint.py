from dataclasses import dataclass

import numpy as np
from shapely.geometry import Point

from .segment import LengthMeters

# Meters per degree of latitude and of longitude. The longitude factor holds
# around the 49th parallel only, the distance is a local approximation.
METERS_PER_DEGREE_LAT = np.float32(111_229)
METERS_PER_DEGREE_LON = np.float32(71_695)


@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

    def point(self):
        # NOTE: shapely.geometry.Point takes the arguments in the opposite order
        return Point(self.lon, self.lat)

    def distance(self, other: "GeoPoint") -> LengthMeters:
        """Equirectangular (flat earth) distance in meters, computed in single precision."""
        d_lat = (np.float32(self.lat) - np.float32(other.lat)) * METERS_PER_DEGREE_LAT
        d_lon = (np.float32(self.lon) - np.float32(other.lon)) * METERS_PER_DEGREE_LON
        return LengthMeters(float(np.sqrt(d_lat * d_lat + d_lon * d_lon)))

    def __sub__(self, other: "GeoPoint") -> LengthMeters:
        return self.distance(other)
