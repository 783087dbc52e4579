"""Logging utilities for svg2pts."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_TAG = "_svg2pts_handler"


@dataclass
class ProcessingStats:
    """Statistics from a conversion run."""

    width: float = 0.0
    height: float = 0.0
    paths_found: int = 0
    paths_sampled: int = 0
    skipped_count: int = 0
    points_written: int = 0
    distance: float = 0.0
    accuracy: float = 0.0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Console output goes to stderr, since stdout may carry point data.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("svg2pts")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ProcessingLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ProcessingStats()

    def log_document(self, width: float, height: float, path_count: int) -> None:
        """Log the loaded document frame and path count."""
        self._logger.info(
            "Document loaded",
            width=width,
            height=height,
            paths=path_count,
        )
        self._stats.width = width
        self._stats.height = height
        self._stats.paths_found = path_count

    def log_element_skipped(self, element: str, reason: str) -> None:
        """Log an element that produced no paths."""
        self._logger.debug("Element skipped", element=element, reason=reason)
        self._stats.skipped_count += 1

    def log_sampling_plan(self, distance: float, accuracy: float) -> None:
        """Log the effective sampling parameters."""
        self._logger.info(
            "Sampling plan",
            distance=distance,
            accuracy=accuracy,
        )
        self._stats.distance = distance
        self._stats.accuracy = accuracy

    def log_path_complete(self, source: str | None, point_count: int) -> None:
        """Log a path written to the output."""
        self._logger.debug(
            "Path sampled",
            source=source,
            points=point_count,
        )
        self._stats.paths_sampled += 1
        self._stats.points_written += point_count

    @property
    def stats(self) -> ProcessingStats:
        """Get current processing statistics."""
        return self._stats
