#!/usr/bin/env python3
"""Check that both configured commute stops can be queried on Trafiklab."""

import argparse
import asyncio
import sys

import aiohttp

from home_dashboard.adapters.config import AppConfig
from home_dashboard.adapters.trafiklab_api import (
    TrafiklabApiError,
    TrafiklabDepartureParser,
    TrafiklabHttpClient,
)


async def check_stops(config_file: str | None, raw_output: bool = False) -> None:
    """Fetch departures for the home and city stops and report what was found."""
    config = AppConfig()
    if config_file:
        config.config_file = config_file
    config.load_toml_overrides()

    stops = [
        (config.home_stop_id, config.home_stop_name),
        (config.city_stop_id, config.city_stop_name),
    ]
    parser = TrafiklabDepartureParser(config.tz)
    failed = []

    async with aiohttp.ClientSession() as session:
        client = TrafiklabHttpClient(
            session, config.trafiklab_api_key, timeout=config.trafiklab_api_timeout
        )
        for stop_id, stop_name in stops:
            print(f"Checking: {stop_name} ({stop_id})", end=" ... ")
            sys.stdout.flush()
            try:
                departures = parser.parse_departures(await client.fetch_departures(stop_id))
            except TrafiklabApiError as e:
                print(f"✗ FAILED: {e}")
                failed.append((stop_id, stop_name, str(e)))
                continue

            relevant = [d for d in departures if d.line in config.relevant_lines]
            print(f"✓ OK ({len(relevant)} of {len(departures)} departures on commute lines)")
            if raw_output:
                for idx, dep in enumerate(departures):
                    print(
                        f"    [{idx:3d}] {dep.real_time.strftime('%H:%M')} "
                        f"{dep.line:>4} -> {dep.destination} "
                        f"[trip {dep.trip_id}, delay {dep.delay_seconds}s]"
                    )

    if failed:
        print(f"\nFailed: {len(failed)}/{len(stops)}")
        for stop_id, stop_name, error in failed:
            print(f"  ✗ {stop_name} ({stop_id}): {error}")
        sys.exit(1)

    print("\nBoth commute stops are accessible! ✓")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Check that the configured commute stops can be queried"
    )
    parser.add_argument("--config-file", help="Path to the TOML configuration file")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Show every departure returned for each stop",
    )
    args = parser.parse_args()

    asyncio.run(check_stops(args.config_file, raw_output=args.raw))
