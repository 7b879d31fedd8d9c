"""
Visitor Portal translation service - Main entry point.

Serves the /translate API used by the portal UI. English <-> Amharic,
with public mirrors and an offline dictionary as fallbacks.
"""

import asyncio
import logging
import secrets
import sys
from aiohttp import web
from adapters.loader import build_server_services
from adapters.web.translate_api import create_translate_app
from config.features import features
from config.settings import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler("translate.log", encoding="utf-8"),
    ],
)
logger = logging.getLogger(__name__)

# Set DEBUG level only for our app loggers, not for noisy libraries
if features.DEBUG_MODE:
    for name in ['adapters', 'core', 'infrastructure', '__main__']:
        logging.getLogger(name).setLevel(logging.DEBUG)
# Silence noisy HTTP logs
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)


async def main():
    """Start the translation API and keep it running until cancelled."""

    logger.info("=== Translation Service Starting ===")
    logger.info("Feature Flags:")
    for key, value in features.to_dict().items():
        logger.info(f"  {key}: {value}")

    if not features.WEB_API_ENABLED:
        logger.error("WEB_API_ENABLED is false, nothing to serve.")
        sys.exit(1)

    services = build_server_services(settings, features)

    stats_token = settings.stats_token or secrets.token_urlsafe(16)
    app = create_translate_app(services.resolver, stats_token)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.web_host, settings.web_port)
    await site.start()
    logger.info(
        f"Translation API running on {settings.web_host}:{settings.web_port} "
        f"- /translate/cache/stats?token={stats_token}"
    )

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        await services.close()
        logger.info("Translation providers closed.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Translation service stopped by user (Ctrl+C)")
    except SystemExit as e:
        sys.exit(e.code)
