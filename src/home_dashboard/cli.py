"""Command line access to the home dashboard data."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Any

import aiohttp

from home_dashboard.adapters.config import AppConfig
from home_dashboard.adapters.json_serializer import (
    commute_board_to_dict,
    departure_to_dict,
    to_jsonable,
    week_schedule_to_dict,
)
from home_dashboard.bootstrap import build_dashboard_service
from home_dashboard.domain.models import (
    CommuteBoard,
    CommuteDeparture,
    Departure,
    GardenReport,
    StopGroup,
    WeatherReport,
    WeekSchedule,
)
from home_dashboard.domain.ports import DashboardService


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _clock(time: datetime) -> str:
    return time.strftime("%H:%M")


def format_week_schedule(schedule: WeekSchedule, owner: str) -> str:
    """Render a week schedule as text, one line per day."""
    lines = [f"{owner}, week {schedule.week_number} {schedule.year}:"]
    for day in schedule.days:
        status = "work" if day.is_working else "free"
        markers = []
        if day.is_holiday:
            markers.append("holiday")
        if day.is_today:
            markers.append("today")
        suffix = f" ({', '.join(markers)})" if markers else ""
        lines.append(f"  {day.day_of_week:<9} {day.calendar_date.isoformat()}  {status}{suffix}")
    return "\n".join(lines)


def format_departure(departure: Departure) -> str:
    delay = departure.delay_minutes
    delay_text = f" ({delay:+d} min)" if delay else ""
    platform = f" [{departure.platform}]" if departure.platform else ""
    return (
        f"{_clock(departure.real_time)}  {departure.line:>4}  {departure.destination}"
        f"{platform}{delay_text}"
    )


def _format_commute_entry(entry: CommuteDeparture) -> str:
    left = " (left)" if entry.has_left else f" in {entry.minutes_until} min"
    return (
        f"    {format_departure(entry.departure)}{left}, "
        f"arrives {entry.to_stop_name} {_clock(entry.arrival_time)} ({entry.travel_minutes} min)"
    )


def format_commute_board(board: CommuteBoard) -> str:
    """Render both directions of the commute board as text."""
    if board.error:
        return f"Error: {board.error}"

    lines = []
    for title, entries in (("From home", board.from_home), ("From city", board.from_city)):
        lines.append(f"{title}:")
        if not entries:
            lines.append("    no departures found")
        lines.extend(_format_commute_entry(entry) for entry in entries)
    for warning in board.warnings:
        lines.append(f"! {warning}")
    if board.next_refresh_at:
        lines.append(f"Next refresh at {_clock(board.next_refresh_at)}")
    return "\n".join(lines)


def format_weather(report: WeatherReport) -> str:
    """Render current weather, forecast and warnings as text."""
    current = report.current
    lines = [
        f"Now: {current.temperature}°C, {current.description}, "
        f"wind {current.wind_speed_kmh} km/h, humidity {current.humidity}%"
    ]
    if report.is_fallback:
        lines.append("(SMHI unavailable, showing fallback data)")
    for day in report.forecast:
        lines.append(
            f"  {day.day_name} {day.max_temp:>3}° / {day.min_temp:>3}°  {day.description}"
        )
    for warning in report.warnings:
        lines.append(f"! {warning.title} ({warning.severity})")
    return "\n".join(lines)


def format_garden(report: GardenReport) -> str:
    """Render the garden report as text."""
    air = report.air_temperature
    lines = [
        f"Soil: {report.soil_temperature}°C, air {air.current}°C "
        f"({air.min}°C to {air.max}°C), sun {report.sun_hours} h",
        f"Frost risk: {'yes' if report.frost_risk else 'no'}",
    ]
    lines.extend(f"  - {advice}" for advice in report.planting_advice)
    lines.append("Tips:")
    lines.extend(f"  - {tip}" for tip in report.seasonal_tips)
    return "\n".join(lines)


def format_stop_groups(groups: list[StopGroup]) -> str:
    lines = []
    for group in groups:
        modes = ", ".join(group.transport_modes)
        lines.append(f"  {group.name} ({group.area_type}, {modes})")
        lines.append(f"    ID: {group.id}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per dashboard panel."""
    parser = argparse.ArgumentParser(
        description="Home dashboard: commute, weather, garden and work schedule",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # This week's and next week's work schedule
  home-dashboard schedule

  # A specific week
  home-dashboard schedule --week 23 --year 2025

  # Next departures in both commute directions
  home-dashboard transport

  # Find the stop group id for a stop
  home-dashboard stop-lookup "Söder Tull"
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    schedule_parser = subparsers.add_parser("schedule", help="Show the work schedule")
    schedule_parser.add_argument("--week", type=int, help="Week number")
    schedule_parser.add_argument("--year", type=int, help="Year (defaults to the current year)")

    departures_parser = subparsers.add_parser("departures", help="Departures at one stop")
    departures_parser.add_argument("stop_id", help="Trafiklab stop group id (e.g. 740055002)")

    subparsers.add_parser("transport", help="Show the commute board")
    subparsers.add_parser("weather", help="Show weather and forecast")
    subparsers.add_parser("garden", help="Show gardening conditions")

    lookup_parser = subparsers.add_parser("stop-lookup", help="Find stops by name")
    lookup_parser.add_argument("name", help="Stop name to search for")

    for subparser in subparsers.choices.values():
        subparser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def run_schedule(
    dashboard: DashboardService, config: AppConfig, args: argparse.Namespace
) -> None:
    if args.week is None:
        schedules = dashboard.get_schedules()
        if args.json:
            current, upcoming = schedules
            _print_json(
                {
                    "current": week_schedule_to_dict(current, config.schedule_owner),
                    "next": week_schedule_to_dict(upcoming, config.schedule_owner),
                }
            )
        else:
            print("\n\n".join(format_week_schedule(s, config.schedule_owner) for s in schedules))
        return

    year = args.year if args.year is not None else datetime.now(config.tz).year
    schedule = dashboard.get_schedule(args.week, year)
    if args.json:
        _print_json(week_schedule_to_dict(schedule, config.schedule_owner))
    else:
        print(format_week_schedule(schedule, config.schedule_owner))


async def run_command(
    dashboard: DashboardService, config: AppConfig, args: argparse.Namespace
) -> None:
    """Execute one CLI subcommand against the dashboard service."""
    if args.command == "schedule":
        run_schedule(dashboard, config, args)

    elif args.command == "departures":
        departures = await dashboard.get_station_departures(args.stop_id)
        if args.json:
            _print_json([departure_to_dict(d) for d in departures])
        elif not departures:
            print(f"No departures found for stop {args.stop_id}", file=sys.stderr)
            sys.exit(1)
        else:
            print("\n".join(format_departure(d) for d in departures))

    elif args.command == "transport":
        board = await dashboard.get_commute_board()
        if args.json:
            _print_json(commute_board_to_dict(board))
        else:
            print(format_commute_board(board))

    elif args.command == "weather":
        report = await dashboard.get_weather()
        if args.json:
            _print_json(to_jsonable(report))
        else:
            print(format_weather(report))

    elif args.command == "garden":
        garden = await dashboard.get_garden()
        if args.json:
            _print_json(to_jsonable(garden))
        else:
            print(format_garden(garden))

    elif args.command == "stop-lookup":
        groups = await dashboard.lookup_stops(args.name)
        if args.json:
            _print_json(to_jsonable(groups))
        elif not groups:
            print(f"No stops found for '{args.name}'", file=sys.stderr)
            sys.exit(1)
        else:
            print(f"\nFound {len(groups)} stop group(s):\n")
            print(format_stop_groups(groups))


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = AppConfig()
        config.load_toml_overrides()
        async with aiohttp.ClientSession() as session:
            dashboard = build_dashboard_service(config, session)
            await run_command(dashboard, config, args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
