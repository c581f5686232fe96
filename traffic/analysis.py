"""Rule-based traffic summary for an area."""

import logging
from dataclasses import dataclass

from core.geo import Coordinate
from traffic.flow import FlowSample
from traffic.incidents import BoundingBox, TrafficIncident

logger = logging.getLogger(__name__)

HEAVY_AREA_CONGESTION = 70
MODERATE_AREA_CONGESTION = 40
SEVERE_INCIDENT = 3


@dataclass(frozen=True)
class AreaSummary:
    """Traffic conditions in an area, condensed into one paragraph.

    Attributes:
        area: Name of the area summarized
        average_congestion: Mean congestion of the flow samples, None if there were none
        incident_count: Number of active incidents
        severe_incidents: Incidents with severity 3 or higher
        text: Human-readable summary
    """

    area: str
    average_congestion: int | None
    incident_count: int
    severe_incidents: int
    text: str


def summarize_area(
    area: str, incidents: list[TrafficIncident], flows: list[FlowSample]
) -> AreaSummary:
    """Summarize flow and incident data for an area.

    The average congestion is the truncated integer mean. An area is heavy
    above 70 and moderate above 40. Any incident of severity 3 or more turns
    the advice towards alternative routes.
    """
    parts: list[str] = []

    average: int | None = None
    if not flows:
        parts.append(f"Traffic conditions in {area} appear normal.")
    else:
        average = sum(f.congestion for f in flows) // len(flows)
        if average > HEAVY_AREA_CONGESTION:
            parts.append(f"Heavy traffic congestion detected in {area}.")
        elif average > MODERATE_AREA_CONGESTION:
            parts.append(f"Moderate traffic levels in {area}.")
        else:
            parts.append(f"Light traffic conditions in {area}.")

    severe = sum(1 for i in incidents if i.severity >= SEVERE_INCIDENT)
    if incidents:
        parts.append(f"There are {len(incidents)} active incident(s) affecting traffic flow.")
        if severe:
            parts.append("Consider alternative routes to avoid major delays.")
        else:
            parts.append("Minor delays expected in some areas.")
    else:
        parts.append("No major incidents reported. Roads are clear.")

    logger.debug(
        f"Summarized {area}: {len(flows)} flow samples, average {average}, "
        f"{len(incidents)} incidents ({severe} severe)"
    )
    return AreaSummary(
        area=area,
        average_congestion=average,
        incident_count=len(incidents),
        severe_incidents=severe,
        text=" ".join(parts),
    )


def grid_points(bbox: BoundingBox, per_side: int = 3) -> list[Coordinate]:
    """Evenly spaced points covering bbox, row by row from the south-west corner.

    Raises:
        ValueError: If per_side is less than 1
    """
    if per_side < 1:
        raise ValueError(f"per_side must be at least 1, got {per_side}")
    if per_side == 1:
        return [
            Coordinate((bbox.min_lat + bbox.max_lat) / 2, (bbox.min_lon + bbox.max_lon) / 2)
        ]
    lat_step = (bbox.max_lat - bbox.min_lat) / (per_side - 1)
    lon_step = (bbox.max_lon - bbox.min_lon) / (per_side - 1)
    return [
        Coordinate(bbox.min_lat + row * lat_step, bbox.min_lon + col * lon_step)
        for row in range(per_side)
        for col in range(per_side)
    ]
