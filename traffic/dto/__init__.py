"""DTOs for traffic and routing results."""

from .flow_dto import FlowSampleDTO
from .incident_dto import IncidentDTO
from .route_dto import RouteDTO
from .summary_dto import AreaSummaryDTO

__all__ = [
    "AreaSummaryDTO",
    "FlowSampleDTO",
    "IncidentDTO",
    "RouteDTO",
]
