"""CLI entry point for the weather lookup service and terminal client."""

import argparse
import asyncio
from datetime import tzinfo
from typing import Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from weather_lookup.client.api import WeatherAPIClient
from weather_lookup.client.recent_searches import RecentSearches
from weather_lookup.client.search import filter_cities
from weather_lookup.client.views import (
    DayView,
    forecast_timezone,
    format_full_date,
    format_hour,
    format_temperature,
    format_weekday,
    select_day,
    sparkline,
    trend_series,
)
from weather_lookup.definitions.data_sources import ForecastTab, UnitSystem
from weather_lookup.exceptions import InvalidInputError, WeatherClientError
from weather_lookup.schemas.weather import CurrentWeather, Forecast

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-lookup",
        description="Weather lookup backend and terminal client",
    )
    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP backend")
    serve_p.add_argument("--reload", action="store_true", help="Reload on code changes")

    # show
    show_p = sub.add_parser("show", help="Show current weather and forecast for a city")
    show_p.add_argument("city", help="City name")
    show_p.add_argument(
        "--units", choices=[u.value for u in UnitSystem], default=UnitSystem.METRIC.value
    )
    show_p.add_argument("--day", type=int, default=0, help="Index of the forecast day to focus")
    show_p.add_argument(
        "--tab",
        choices=[t.value for t in ForecastTab],
        default=ForecastTab.TEMPERATURE.value,
        help="Metric plotted by the hourly graph",
    )
    show_p.add_argument("--backend", default=None, help="Backend base URL")

    # recent
    recent_p = sub.add_parser("recent", help="List recent searches")
    recent_p.add_argument("--clear", action="store_true", help="Forget recent searches")

    # suggest
    suggest_p = sub.add_parser("suggest", help="Autocomplete a city name")
    suggest_p.add_argument("query", nargs="?", default="")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        from weather_lookup.main import run

        run(reload=args.reload)
        return 0
    if args.command == "show":
        return cmd_show(args)
    if args.command == "recent":
        return cmd_recent(args)
    if args.command == "suggest":
        for city in filter_cities(args.query):
            console.print(city)
        return 0

    parser.print_help()
    return 1


async def fetch_lookup(
    city: str, units: str, backend_url: Optional[str] = None
) -> Tuple[CurrentWeather, Forecast]:
    async with WeatherAPIClient(base_url=backend_url) as client:
        return await client.get_weather_and_forecast(city, units)


def cmd_show(args: argparse.Namespace) -> int:
    units = UnitSystem.normalize(args.units)
    city = args.city.strip()
    if not city:
        console.print("[red]Please enter a city name.[/red]")
        return 1

    try:
        weather, forecast = asyncio.run(fetch_lookup(city, units.value, args.backend))
        view = select_day(forecast, weather, args.day)
    except (WeatherClientError, InvalidInputError) as e:
        console.print(f"[red]{e.message}[/red]")
        return 1

    RecentSearches().add(city)

    render_current(view, units)
    render_trend(view, ForecastTab(args.tab), units, forecast_timezone(forecast))
    render_daily(forecast, view.index, units)
    return 0


def cmd_recent(args: argparse.Namespace) -> int:
    recent = RecentSearches()
    if args.clear:
        recent.clear()
        console.print("Recent searches cleared.")
        return 0

    searches = recent.get()
    if not searches:
        console.print("No recent searches.")
    for city in searches:
        console.print(city)
    return 0


def render_current(view: DayView, units: UnitSystem) -> None:
    weather = view.weather
    place = ", ".join(part for part in (weather.city, weather.country) if part)
    wind = "--" if weather.wind_speed is None else f"{round(weather.wind_speed)} {units.wind_label}"
    humidity = "--" if weather.humidity is None else f"{weather.humidity}%"

    body = (
        f"[bold]{format_temperature(weather.temperature, units)}[/bold]  "
        f"{weather.condition or ''}\n"
        f"{weather.description or ''}\n\n"
        f"Feels like: {format_temperature(weather.feels_like, units)}\n"
        f"Humidity: {humidity}\n"
        f"Wind: {wind}"
    )
    console.print(Panel(body, title=place or "Weather", border_style="cyan"))


def render_trend(view: DayView, tab: ForecastTab, units: UnitSystem, tz: tzinfo) -> None:
    points = trend_series(view.hourly, tab, units)
    if not points:
        return

    table = Table(title=f"{tab.value} trend", show_header=True)
    table.add_column("Time", style="cyan")
    table.add_column(tab.value, justify="right")
    for point in points:
        table.add_row(format_hour(point.time, tz), point.label)

    console.print(sparkline([p.value for p in points]))
    console.print(table)


def render_daily(forecast: Forecast, selected: int, units: UnitSystem) -> None:
    if not forecast.daily:
        return

    table = Table(title="Daily forecast")
    table.add_column("Day", style="cyan")
    table.add_column("Date")
    table.add_column("Condition")
    table.add_column("Max", justify="right", style="red")
    table.add_column("Min", justify="right", style="blue")
    for i, day in enumerate(forecast.daily):
        marker = "▶ " if i == selected else ""
        table.add_row(
            f"{marker}{format_weekday(day.date)}",
            format_full_date(day.date),
            day.condition or "",
            format_temperature(day.max, units),
            format_temperature(day.min, units),
        )
    console.print(table)


if __name__ == "__main__":
    raise SystemExit(main())
