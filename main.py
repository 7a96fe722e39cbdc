"""
Chipotle Loader
Main entry point: one batch run from the restaurant search API into the configured store
"""

import logging
import sys

from app.config import settings
from app.exceptions import ChipotleLoaderError
from adapters.chipotle_client import ChipotleClient
from domain.models import engine
from services import LoaderService, build_default_query

_logger = logging.getLogger("chipotle.main")


def main() -> int:
    """Run one load; the only place a failure turns into a non-zero exit status"""
    # Setup logging with configured level and format
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )

    try:
        with ChipotleClient(
            api_key=settings.api_key,
            base_url=settings.api_base_url,
            timeout=settings.http_timeout_sec,
        ) as client:
            loader = LoaderService(
                client,
                engine,
                worker_count=settings.fetch_worker_count,
                fast_load_pragmas=settings.fast_load_pragmas,
            )
            loader.run(build_default_query(settings))
    except ChipotleLoaderError as exc:
        _logger.error("Load failed: %s", exc)
        if exc.details:
            _logger.error("Error details: %s", exc.details)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
