"""
Logging utilities for the errorpoints library.

Library Logging Conventions
---------------------------
1. **Library code never calls configure_logging()** - it only uses get_logger(__name__).
2. **Scripts and examples may call configure_logging()** to see log output.
3. When errorpoints is used inside an application that has configured logging,
   all errorpoints records flow to that application's handlers.

errorpoints never writes log files.

Example Usage
-------------
In library code (algorithms/spaced.py, algorithms/interpolation.py, etc.):
    ```python
    from errorpoints.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.debug("kept %d points", n)
    ```

In standalone scripts:
    ```python
    from errorpoints.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "errorpoints"
LOG_LEVEL_ENV_VAR = "ERRORPOINTS_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the errorpoints logger only (never root).

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to the
        ERRORPOINTS_LOG_LEVEL env var, or "INFO" if unset.
    fmt:
        Log message format. Defaults to a standard format.
    datefmt:
        Date format. Defaults to "%Y-%m-%d %H:%M:%S".
    force:
        If True, remove existing handlers before adding a new one (allows
        reconfiguration). If False, skip if a stderr handler is already present.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if fmt is None:
        fmt = DEFAULT_FMT
    if datefmt is None:
        datefmt = DEFAULT_DATEFMT

    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name.

    If name is None, returns the 'errorpoints' logger.
    Otherwise, returns logging.getLogger(name).
    """
    if name is None:
        name = LOGGER_NAME
    return logging.getLogger(name)
