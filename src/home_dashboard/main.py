"""Main entry point for the home dashboard server."""

import asyncio
import logging
import sys

import aiohttp

from home_dashboard.adapters.config import AppConfig
from home_dashboard.adapters.web import StarletteWebAdapter
from home_dashboard.bootstrap import build_dashboard_service

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()

    try:
        config.load_toml_overrides()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(
        f"Commute: {config.home_stop_name} ({config.home_stop_id}) <-> "
        f"{config.city_stop_name} ({config.city_stop_id}), lines {', '.join(config.relevant_lines)}"
    )

    async with aiohttp.ClientSession() as session:
        dashboard = build_dashboard_service(config, session)
        display_adapter = StarletteWebAdapter(dashboard, config)

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
