"""
Main entry point for sdtd_browser.
Usage: python -m sdtd_browser [--profile NAME] [--weapons] [QUERY]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config_data import ConfigDataService, filter_objects, sort_entities, weapon_items
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sdtd_browser", description=__doc__)
    parser.add_argument("query", nargs="?", default="", help="Filter objects by name")
    parser.add_argument("--profile", default="default", help="Settings profile")
    parser.add_argument("--config-path", help="Override the config documents folder")
    parser.add_argument("--weapons", action="store_true", help="List weapons with range stats")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def print_weapons(service: ConfigDataService) -> None:
    weapons = sort_entities(weapon_items(service.items), lambda item: item.name)
    for item in weapons:
        rpm = item.rounds_per_minute
        print(
            f"{item.name:<40} falloff={item.damage_falloff_range or '-':<8} "
            f"range={item.max_range or '-':<8} rpm={f'{rpm:.0f}' if rpm else '-'}"
        )


def print_objects(service: ConfigDataService, query: str) -> None:
    for obj in filter_objects(service.objects.get_all(), query):
        parts = [
            part
            for part in ("item", "recipe", "block", "item_modifier")
            if getattr(obj, part) is not None
        ]
        print(f"{obj.name:<40} {', '.join(parts)}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    logger = logging.getLogger(f"{__name__}.main")
    try:
        settings = AppSettings(profile=args.profile)
        # Command line override is used for this run only, never saved
        config_path = Path(args.config_path) if args.config_path else None

        setup_logging(settings)
        logger.info("Starting sdtd_browser")
        logger.info(f"Configuration loaded from {settings.get_settings_file_path()}")

        validation = settings.validate(config_path)
        for warning in validation.warnings:
            logger.warning(f"  {warning}")
        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            return 1

        if config_path is not None:
            service = ConfigDataService(config_path)
        else:
            service = ConfigDataService.from_settings(settings)
        if args.weapons:
            print_weapons(service)
        else:
            print_objects(service, args.query)
        return 0

    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except Exception:
        logger.exception("Unhandled exception in main")
        return 1


if __name__ == "__main__":
    sys.exit(main())
