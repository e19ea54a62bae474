"""Application entry point."""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "HOTSEAT_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from *level* or the environment."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Launch the Hotseat Chess application."""
    from hotseat.ui.bootstrap import run_application

    configure_logging()
    sys.exit(run_application())


if __name__ == "__main__":
    main()
