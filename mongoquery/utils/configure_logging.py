import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Configure mongoquery logging.

    The package never installs handlers on its own; applications call this once
    at startup if they want the package's messages on stderr or in a file.

    Args:
        level: Level for the ``mongoquery`` logger.
        log_file: Optional path to a rotating log file. Logs go to stderr if None.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("mongoquery")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    _CONFIGURED = True
