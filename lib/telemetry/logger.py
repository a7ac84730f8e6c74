"""Standard library logging wiring."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the root logger.

    Calling this more than once only updates the level.
    """

    root = logging.getLogger()
    root.setLevel(level.upper())
    if any(getattr(h, "_backend_handler", False) for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._backend_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
