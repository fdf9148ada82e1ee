"""
Logger utilities for the FAO-56 formula library.

Library modules log through the standard ``logging`` module. Command-line
runs and range-check warnings go through loguru, configured here from
``config.settings.LOGGING``. Every record carries the name of the
computation step it was emitted in (``-`` outside any step).
"""

import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.settings import LOGGING

NO_STEP = "-"


class Logger:
    """
    Loguru front end for fao56_et.

    Sinks are replaced, not added, on every call to :meth:`setup`, so the
    CLI can reconfigure logging once per invocation.
    """

    level: str = LOGGING["level"]

    @staticmethod
    def setup(
        level: Optional[str] = None,
        log_file: Optional[str] = None,
        console: bool = True,
        name: str = "fao56_et"
    ) -> None:
        """
        Configure console and file sinks.

        Args:
            level: Minimum level; defaults to ``LOGGING["level"]``
            log_file: Log file path; defaults to ``LOGGING["log_file"]``
                when ``LOGGING["file_log"]`` is set, otherwise no file
            console: Write records to stderr (stdout is kept for results)
            name: Value bound as ``extra["package"]`` on every record
        """
        level = level or LOGGING["level"]
        if log_file is None and LOGGING["file_log"]:
            log_file = LOGGING["log_file"]

        logger.remove()
        logger.configure(extra={"step": NO_STEP, "package": name})

        if console:
            logger.add(sys.stderr, format=LOGGING["format"], level=level, colorize=True)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                str(log_path),
                format=LOGGING["format"],
                level=level,
                rotation=LOGGING["rotation"],
                retention=LOGGING["retention"],
                compression="gz",
            )

        Logger.level = level

    @staticmethod
    def configure_for_testing() -> None:
        """Drop every sink so tests run silently."""
        Logger.setup(level="DEBUG", console=False, log_file=None)

    @staticmethod
    def debug(message: str, **kwargs) -> None:
        logger.opt(depth=1).debug(message, **kwargs)

    @staticmethod
    def info(message: str, **kwargs) -> None:
        logger.opt(depth=1).info(message, **kwargs)

    @staticmethod
    def warning(message: str, **kwargs) -> None:
        logger.opt(depth=1).warning(message, **kwargs)

    @staticmethod
    def error(message: str, **kwargs) -> None:
        logger.opt(depth=1).error(message, **kwargs)


@contextmanager
def log_step(name: str):
    """
    Run a block as a named computation step.

    Records emitted inside the block are tagged with ``name``; the step's
    duration is logged on success and the error on failure.

    Usage:
        with log_step("Penman-Monteith ET0"):
            et0 = et0_penman_monteith(...)
    """
    start = time.perf_counter()
    with logger.contextualize(step=name):
        Logger.info("started")
        try:
            yield
        except Exception as e:
            Logger.error(f"failed: {e}")
            raise
        Logger.info(f"completed in {time.perf_counter() - start:.3f} s")

