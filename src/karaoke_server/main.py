#!/usr/bin/env python3
"""Main entry point for the karaoke media and queue server."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path

from karaoke_server.domain.shared.messages import LogTemplates

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def main() -> int:
    from karaoke_server.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)

    import uvicorn

    from karaoke_server.config.container import create_container
    from karaoke_server.infrastructure.http.app import create_app

    container = create_container(settings)
    app = create_app(container)

    server = settings.server
    logger.info(LogTemplates.SERVER_STARTING, settings.environment, server.host, server.port)

    try:
        uvicorn.run(app, host=server.host, port=server.port, log_config=None)
        logger.info(LogTemplates.SERVER_STOPPED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.SERVER_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.SERVER_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
