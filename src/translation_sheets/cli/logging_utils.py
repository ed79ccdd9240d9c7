from __future__ import annotations
import logging

LOGGER_ROOT = "translations"


def setup_logging(verbosity: int) -> None:
    """
    - 0  -> WARNING
    - 1  -> INFO
    - 2+ -> DEBUG

    Only the 'translations.*' loggers follow the verbosity; third-party
    libraries stay at WARNING.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s  %(name)s:%(message)s")
    logging.getLogger(LOGGER_ROOT).setLevel(level)
