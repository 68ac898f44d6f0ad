"""Command line access to the AirParif endpoints."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Sequence

from airparif.client import AirparifClient
from airparif.config import AirparifConfig, get_settings
from airparif.errors import AirparifError
from airparif.frame import alerts_to_frame, measurements_to_frame
from airparif.models import Day

DAY_CHOICES = {day.token: day for day in Day}


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="airparif", description="Query the AirParif pollution services.")
    parser.add_argument("--api-key", default=None, help="API key (default: AIRPARIF_API_KEY)")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the records to this CSV file instead of printing them",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log HTTP queries and payloads")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("indice", help="Global index for yesterday, today and tomorrow")
    day_parser = commands.add_parser("jour", help="Per pollutant index for one day")
    day_parser.add_argument("day", choices=sorted(DAY_CHOICES))
    city_parser = commands.add_parser("villes", help="Index of cities given by INSEE code")
    city_parser.add_argument("cities", nargs="+", metavar="INSEE")
    commands.add_parser("episode", help="Pollution alerts")
    return parser


def run(args: argparse.Namespace, client: AirparifClient) -> list:
    if args.command == "indice":
        return client.index()
    if args.command == "jour":
        return client.index_day(DAY_CHOICES[args.day])
    if args.command == "villes":
        return client.index_city(args.cities)
    return client.episode()


def main(argv: Sequence[str] | None = None, client: AirparifClient | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if client is None:
        base = get_settings().airparif
        client = AirparifClient(
            settings=AirparifConfig(
                api_key=args.api_key or base.api_key,
                base_url=base.base_url,
                request_timeout_seconds=base.request_timeout_seconds,
            )
        )

    try:
        records = run(args, client)
    except AirparifError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if args.output is not None:
        to_frame = alerts_to_frame if args.command == "episode" else measurements_to_frame
        args.output.parent.mkdir(parents=True, exist_ok=True)
        to_frame(records).to_csv(args.output, index=False)
        print(f"Fetched {len(records)} records -> {args.output}")
    else:
        for record in records:
            print(record)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
