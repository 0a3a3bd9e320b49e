import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str | None = None) -> None:
    """
    Configure root logging for an application entrypoint.

    Level comes from the argument, then WHOSENXT_LOG_LEVEL, then INFO.
    Library modules only ever call logging.getLogger(__name__).
    """
    if level is None:
        level = os.environ.get("WHOSENXT_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=LOG_FORMAT)
