"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import json
import logging

from weatherdash.config.loader import (
    get_config_value,
    load_config,
    redacted,
    set_config_value,
)
from weatherdash.models.common import UnitSystem
from weatherdash.pipeline.controller import DashboardController
from weatherdash.pipeline.state import DashboardState, Phase
from weatherdash.reporting.formatters import (
    format_dashboard_json,
    format_dashboard_text,
)

DEFAULT_CONFIG = "weatherdash.yaml"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8777


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Current conditions, 24-hour and 5-day weather forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # show
    show_p = sub.add_parser("show", help="Fetch and print the dashboard")
    show_p.add_argument("--city", help="City to look up (default: geolocate)")
    show_p.add_argument(
        "--units", choices=[u.value for u in UnitSystem], help="Unit system"
    )
    show_p.add_argument(
        "--json", action="store_true", help="Print JSON instead of text"
    )

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Validate a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard HTTP API")
    serve_p.add_argument("--host", default=DEFAULT_HOST)
    serve_p.add_argument("--port", type=int, default=DEFAULT_PORT)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "show":
        return _cmd_show(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_show(config, args) -> int:
    if args.units:
        config = config.model_copy(
            update={
                "display": config.display.model_copy(
                    update={"units": UnitSystem(args.units)}
                )
            }
        )
    controller = DashboardController.from_config(config)
    state = asyncio.run(_show(controller, args.city))
    if args.json:
        print(format_dashboard_json(state))
    else:
        print(format_dashboard_text(state))
    return 0 if state.phase == Phase.READY else 1


async def _show(controller: DashboardController, city: str | None) -> DashboardState:
    if city:
        return await controller.search(city)
    return await controller.initialize()


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(json.dumps(redacted(config), indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherdash.server import create_app

    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0
