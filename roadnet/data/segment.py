import dataclasses
from typing import Dict, NewType, Optional

import numpy as np

SpeedKph = NewType("SpeedKph", float)
SpeedMps = NewType("SpeedMps", float)
LengthMeters = NewType("LengthMeters", float)
TravelTime = NewType("TravelTime", int)

# km/h to m/s factor, in single precision like the rest of the cost arithmetic
KMPH = np.float32(1000) / np.float32(3600)


@dataclasses.dataclass(frozen=True)
class Arc:
    # Internal index of the target node
    index: int
    # Travel time along the arc (in whole seconds)
    cost: TravelTime


# Maximal speeds of the road categories usable for routing. Other values of
# the `highway` tag make the whole way unusable.
HIGHWAY_SPEEDS: Dict[str, SpeedKph] = {
    "motorway": SpeedKph(110),
    "trunk": SpeedKph(110),
    "primary": SpeedKph(70),
    "secondary": SpeedKph(60),
    "tertiary": SpeedKph(50),
    "motorway_link": SpeedKph(50),
    "trunk_link": SpeedKph(50),
    "primary_link": SpeedKph(50),
    "secondary_link": SpeedKph(50),
    "road": SpeedKph(40),
    "unclassified": SpeedKph(40),
    "residential": SpeedKph(30),
    "unsurfaced": SpeedKph(30),
    "living_street": SpeedKph(10),
    "service": SpeedKph(5),
}


def speed_kph_to_mps(speed_kph: SpeedKph) -> SpeedMps:
    return SpeedMps(float(KMPH * np.float32(speed_kph)))


def highway_speed(category: str) -> Optional[SpeedMps]:
    """Speed (in m/s) of the road category, `None` for categories not usable for routing."""
    speed_kph = HIGHWAY_SPEEDS.get(category)
    if speed_kph is None:
        return None
    return speed_kph_to_mps(speed_kph)


def travel_time(length: LengthMeters, speed: SpeedMps) -> TravelTime:
    """Whole seconds needed to pass `length` at `speed`, truncated toward zero.

    The division is done in single precision. Very short segments give zero cost.
    """
    assert speed > 0, "Travel time is defined for positive speeds only."
    return TravelTime(int(np.float32(length) / np.float32(speed)))
