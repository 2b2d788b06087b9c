"""Process entry point: resolve startup configuration, then serve with uvicorn.

Exits with status 1 before binding the port when a mandatory setting is missing.
"""

import asyncio
import logging
import sys

import uvicorn

from helium.config import get_settings
from helium.core.errors import StartupConfigMissingError
from helium.infrastructure.observability import setup_logging
from helium.infrastructure.secrets import resolve_store_config

logger = logging.getLogger("helium")


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        store_config = asyncio.run(resolve_store_config(settings))
    except StartupConfigMissingError as e:
        logger.critical(f"Startup aborted: {e}", extra={"error_code": e.code})
        return 1

    from helium.main import app

    app.state.store_config = store_config
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
