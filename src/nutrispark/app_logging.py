"""Logging setup for the NutriSpark service."""

import logging

_LOGGER_NAME = "nutrispark"
_HANDLER_NAME = "nutrispark-stream"
_FORMAT = "%(asctime)s %(levelname)s [%(environment)s] %(name)s: %(message)s"


class _EnvironmentFilter(logging.Filter):
    """Stamp every record with the deployment environment."""

    def __init__(self, environment: str) -> None:
        super().__init__()
        self.environment = environment

    def filter(self, record: logging.LogRecord) -> bool:
        record.environment = self.environment
        return True


def configure_logging(
    level: str = "INFO", environment: str = "local"
) -> logging.Logger:
    """Attach the service handler once and apply level and environment.

    Repeated calls reuse the existing handler and only update the level and
    the environment tag, so app factories can call this freely.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(resolved)
    handler = next(
        (item for item in logger.handlers if item.get_name() == _HANDLER_NAME), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    for existing in [f for f in handler.filters if isinstance(f, _EnvironmentFilter)]:
        handler.removeFilter(existing)
    handler.addFilter(_EnvironmentFilter(environment))
    logger.propagate = False
    return logger
