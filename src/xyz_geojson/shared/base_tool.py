"""
xyz-geojson — File Tool Base
============================
Abstract base class for the file-to-file wrappers around the conversion
functions.

Design Pattern:
    Template Method — :meth:`FileTool.run` fixes the pipeline
    (validate → process → report) and subclasses fill in
    :meth:`validate_inputs` and :meth:`process`.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

# Package root logger; every module logs through a child of it.
logger = logging.getLogger("xyz_geojson")

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s %(name)s — %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(verbose: bool = False) -> None:
    """Attach a console handler to the ``xyz_geojson`` logger once.

    Uses DEBUG level when *verbose* is ``True``, otherwise INFO.  Calling
    it again only adjusts the level.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


class FileTool(ABC):
    """Abstract base for tools that read one input file and write one output.

    Attributes:
        input_path: Path to the input file.
        output_path: Path the output is written to.
        verbose: When ``True`` DEBUG-level messages are logged as well.
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        *,
        verbose: bool = False,
    ) -> None:
        self.input_path: Path = Path(input_path)
        self.output_path: Path = Path(output_path)
        self.verbose: bool = verbose

        configure_logging(verbose)

    # ------------------------------------------------------------------
    # Abstract interface
    # ------------------------------------------------------------------

    @abstractmethod
    def validate_inputs(self) -> None:
        """Validate all inputs before processing begins.

        Raises:
            InputValidationError: If a precondition does not hold.
        """

    @abstractmethod
    def process(self) -> None:
        """Do the actual work.  Called by :meth:`run` after validation."""

    # ------------------------------------------------------------------
    # Template method
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Run :meth:`validate_inputs`, then :meth:`process`, then report.

        Any exception from either step propagates unchanged.
        """
        logger.info("Starting %s", self.__class__.__name__)
        start = time.perf_counter()

        self.validate_inputs()
        self.process()

        elapsed = time.perf_counter() - start
        self._report_success(elapsed)

    def _report_success(self, elapsed: float) -> None:
        logger.info(
            "%s completed in %.2fs → %s",
            self.__class__.__name__,
            elapsed,
            self.output_path,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"input_path={self.input_path!r}, "
            f"output_path={self.output_path!r})"
        )
