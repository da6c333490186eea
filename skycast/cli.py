"""CLI entry point for skycast."""

import argparse
import asyncio
import logging

from skycast.config.defaults import DEFAULT_CONFIG_PATH
from skycast.config.loader import get_config_value, load_config
from skycast.config.schema import SkycastConfig
from skycast.errors import ConfigurationError
from skycast.forecast.aggregator import ForecastAggregator
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.ingest.weather_fetcher import WeatherFetcher
from skycast.models.weather import WeatherQuery
from skycast.reporting.formatters import (
    format_suggestions_text,
    format_views_json,
    format_views_text,
)
from skycast.session.controller import SessionController


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Current conditions, hourly and daily forecast",
    )
    parser.add_argument(
        "--config", default=str(DEFAULT_CONFIG_PATH), help="Config YAML path"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # weather
    weather_p = sub.add_parser("weather", help="Show weather for a location")
    weather_p.add_argument("--city", help="City name, e.g. 'Paris' or 'Paris,FR'")
    weather_p.add_argument("--lat", type=float, help="Latitude")
    weather_p.add_argument("--lon", type=float, help="Longitude")
    weather_p.add_argument("--json", action="store_true", help="JSON output")

    # search
    search_p = sub.add_parser("search", help="Suggest locations for a partial name")
    search_p.add_argument("text", help="Partial city name")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. search.debounce_ms")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP proxy app")
    serve_p.add_argument("--host", default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(args)
    else:
        parser.print_help()
        return 1


def _build_controller(config: SkycastConfig) -> SessionController:
    client = OpenWeatherClient.from_config(config.provider)
    fetcher = WeatherFetcher(
        client,
        ForecastAggregator(config.forecast),
        uv_source=client.get_uv_index if config.provider.uv_enabled else None,
    )
    return SessionController(fetcher, client.geocode, config)


def _cmd_weather(config: SkycastConfig, args) -> int:
    if args.lat is not None and args.lon is not None:
        query = WeatherQuery(lat=args.lat, lon=args.lon)
    else:
        query = WeatherQuery(city=args.city or config.session.default_city)
    try:
        controller = _build_controller(config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 2

    state = asyncio.run(controller.load(query))
    if state.views is None:
        print(f"Error: {state.error}")
        return 2 if state.fatal else 1
    print(format_views_json(state.views) if args.json else format_views_text(state.views))
    return 0


def _cmd_search(config: SkycastConfig, args) -> int:
    try:
        controller = _build_controller(config)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return 2

    async def _run() -> None:
        controller.type_text(args.text)
        controller.search.submit()
        await controller.search.drain()

    asyncio.run(_run())
    print(format_suggestions_text(controller.state.suggestions))
    return 0


def _cmd_config(config: SkycastConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1


def _cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("skycast.api:app", host=args.host, port=args.port)
    return 0
