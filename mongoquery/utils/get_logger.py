import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Loggers live under the ``mongoquery`` namespace so a single
    ``configure_logging()`` call controls all of them.
    """
    return logging.getLogger(f"mongoquery.{name}")
