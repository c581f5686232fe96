"""Command-line entry point for route recommendations and demo incidents."""

import argparse
import logging
import random
import sys
from typing import Any

import orjson

from core.geo import Coordinate
from routing.config import RoutingConfig
from routing.providers import SyntheticRoutingProvider
from routing.selection import RouteSelectionPolicy
from routing.synthetic import SyntheticRouteGenerator
from traffic.cities import get_city
from traffic.analysis import grid_points, summarize_area
from traffic.dto import AreaSummaryDTO, FlowSampleDTO, IncidentDTO, RouteDTO
from traffic.flow import DemoFlowLookup
from traffic.incidents import BoundingBox, DemoIncidentGenerator

logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Congestion-aware route recommendations")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for synthetic data")
    subparsers = parser.add_subparsers(dest="command", required=True)

    route = subparsers.add_parser("route", help="Recommend a route between two points")
    route.add_argument("--start", required=True, help="Origin as 'lat,lon'")
    route.add_argument("--end", required=True, help="Destination as 'lat,lon'")
    route.add_argument(
        "--no-avoid-traffic",
        dest="avoid_traffic",
        action="store_false",
        help="Return the primary route without evaluating traffic",
    )
    route.add_argument("--congestion-trigger", type=int, default=None)
    route.add_argument("--improvement-threshold", type=int, default=None)

    incidents = subparsers.add_parser("incidents", help="List demo incidents in an area")
    area = incidents.add_mutually_exclusive_group(required=True)
    area.add_argument("--bbox", help="'minLon,minLat,maxLon,maxLat'")
    area.add_argument("--city", help="Preset city name")

    flow = subparsers.add_parser("flow", help="Report traffic flow at a single point")
    flow.add_argument("--lat", type=float, required=True, help="Latitude")
    flow.add_argument("--lon", type=float, required=True, help="Longitude")

    summary = subparsers.add_parser("summary", help="Summarize traffic in an area")
    summary_area = summary.add_mutually_exclusive_group(required=True)
    summary_area.add_argument("--bbox", help="'minLon,minLat,maxLon,maxLat'")
    summary_area.add_argument("--city", help="Preset city name")
    summary.add_argument(
        "--grid", type=int, default=3, help="Flow sample points per side of the area"
    )

    return parser


def run_route(args: argparse.Namespace, rng: random.Random) -> dict[str, Any]:
    overrides = {
        key: value
        for key, value in (
            ("congestion_trigger", args.congestion_trigger),
            ("improvement_threshold", args.improvement_threshold),
        )
        if value is not None
    }
    if args.seed is not None:
        # Concurrent lookups would draw from the shared rng in scheduling order
        overrides["max_workers"] = 1
    config = RoutingConfig.from_dict(overrides)
    generator = SyntheticRouteGenerator(config, rng=rng)
    policy = RouteSelectionPolicy(
        flow_lookup=DemoFlowLookup(rng=rng),
        config=config,
        fallback=generator,
    )
    decision = policy.select_route(
        Coordinate.parse(args.start),
        Coordinate.parse(args.end),
        args.avoid_traffic,
        SyntheticRoutingProvider(generator),
    )
    return RouteDTO.from_decision(decision).to_dict()


def run_incidents(args: argparse.Namespace, rng: random.Random) -> list[dict[str, Any]]:
    bbox = get_city(args.city).bbox if args.city else BoundingBox.parse(args.bbox)
    incidents = DemoIncidentGenerator(rng=rng).generate(bbox)
    return [IncidentDTO.from_incident(incident).to_dict() for incident in incidents]


def run_flow(args: argparse.Namespace, rng: random.Random) -> dict[str, Any]:
    sample = DemoFlowLookup(rng=rng).lookup(Coordinate(args.lat, args.lon))
    return FlowSampleDTO.from_sample(sample).to_dict()


def run_summary(args: argparse.Namespace, rng: random.Random) -> dict[str, Any]:
    if args.city:
        city = get_city(args.city)
        area, bbox = city.name, city.bbox
    else:
        bbox = BoundingBox.parse(args.bbox)
        area = bbox.to_string()
    incidents = DemoIncidentGenerator(rng=rng).generate(bbox)
    lookup = DemoFlowLookup(rng=rng)
    flows = [lookup.lookup(point) for point in grid_points(bbox, args.grid)]
    return AreaSummaryDTO.from_summary(summarize_area(area, incidents, flows)).to_dict()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    rng = random.Random(args.seed)

    try:
        if args.command == "route":
            result: Any = run_route(args, rng)
        elif args.command == "flow":
            result = run_flow(args, rng)
        elif args.command == "summary":
            result = run_summary(args, rng)
        else:
            result = run_incidents(args, rng)
    except (ValueError, KeyError) as e:
        logger.error(f"Invalid input: {e}")
        return 2

    sys.stdout.write(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode())
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
