"""Processing orchestration for the conversion pipeline.

This module coordinates the full workflow: read the document, resolve the
sampling plan, flatten and resample every path, and write the points in
document order. Paths can optionally be sampled in worker processes using
ProcessPoolExecutor.

Key components:
- sample_path: Flatten then resample one path
- process_path: Top-level picklable function for parallel execution
- PathProcessor: Main orchestrator class
"""

import time
from collections.abc import Iterator
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, BinaryIO

from svg2pts.config import Svg2PtsSettings
from svg2pts.core.flatten import flatten_path
from svg2pts.core.resample import polyline_length, resample
from svg2pts.domain import Path, Point
from svg2pts.io import PointWriter, SvgReader
from svg2pts.utils import ProcessingLogger, ProcessingStats, configure_logging


@dataclass(frozen=True)
class SamplingPlan:
    """Effective sampling parameters for a run.

    Attributes:
        distance: Target spacing between points (0 = no normalization)
        accuracy: Flattening tolerance
    """

    distance: float
    accuracy: float


def sample_path(path: Path, accuracy: float, distance: float) -> list[Point]:
    """Flatten a path and resample it to the target distance.

    Args:
        path: Path in output coordinates
        accuracy: Flattening tolerance
        distance: Target spacing (0 = keep flattened points)

    Returns:
        Points for this path in order
    """
    return resample(flatten_path(path, accuracy), distance)


def process_path(
    path_dict: dict[str, Any],
    accuracy: float,
    distance: float,
) -> list[tuple[float, float]]:
    """Sample a single serialized path.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Errors propagate to the caller through the future.

    Args:
        path_dict: Serialized path (from Path.to_dict())
        accuracy: Flattening tolerance
        distance: Target spacing

    Returns:
        Sampled points as (x, y) tuples
    """
    path = Path.from_dict(path_dict)
    return [p.to_tuple() for p in sample_path(path, accuracy, distance)]


class PathProcessor:
    """Orchestrates document-to-points conversion.

    Manages the complete workflow:
    1. Load the SVG document and collect visible paths
    2. Resolve distance and accuracy (point-count target, accuracy policy)
    3. Sample paths, in-process or in worker processes
    4. Write points in path order

    Example:
        settings = Svg2PtsSettings()
        processor = PathProcessor(settings)
        with open("out.pts", "wb") as sink:
            stats = processor.process(svg_bytes, sink)
    """

    def __init__(self, config: Svg2PtsSettings) -> None:
        """Initialize the processor with configuration.

        Args:
            config: svg2pts settings containing sampling and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
        )
        self.processing_logger = ProcessingLogger(self.logger)

    def plan(self, paths: list[Path]) -> SamplingPlan:
        """Resolve the effective distance and accuracy.

        With a point-count target, the paths are flattened once to measure
        their total length L, and the distance becomes
        L / max(points - path_count, 1), since each path also contributes
        its starting point.

        Args:
            paths: All paths that will be sampled

        Returns:
            SamplingPlan for the run
        """
        sampling = self.config.sampling

        if sampling.points is None:
            distance = sampling.distance
            return SamplingPlan(distance=distance, accuracy=sampling.accuracy_for(distance))

        measure_accuracy = sampling.accuracy_for(0.0)
        total_length = sum(
            polyline_length(flatten_path(path, measure_accuracy)) for path in paths
        )
        steps = max(sampling.points - len(paths), 1)
        distance = total_length / steps

        self.logger.debug(
            "Derived distance from point target",
            points=sampling.points,
            total_length=round(total_length, 4),
            distance=distance,
        )

        return SamplingPlan(distance=distance, accuracy=sampling.accuracy_for(distance))

    def sample(
        self,
        paths: list[Path],
        plan: SamplingPlan,
        max_workers: int | None = None,
    ) -> Iterator[list[Point]]:
        """Sample paths, yielding each path's points in input order.

        Args:
            paths: Paths to sample
            plan: Sampling parameters
            max_workers: Worker processes (None = config, 1 = in-process)

        Yields:
            Point lists, one per path, in the order of ``paths``
        """
        if max_workers is None:
            max_workers = self.config.processing.max_workers

        if max_workers <= 1 or len(paths) <= 1:
            for path in paths:
                yield sample_path(path, plan.accuracy, plan.distance)
            return

        yield from self._sample_parallel(paths, plan, max_workers)

    def _sample_parallel(
        self,
        paths: list[Path],
        plan: SamplingPlan,
        max_workers: int,
    ) -> Iterator[list[Point]]:
        """Sample paths in worker processes, preserving path order.

        Results are collected as they complete and yielded as soon as every
        earlier path is available.
        """
        self.logger.info(
            "Starting parallel sampling",
            path_count=len(paths),
            max_workers=max_workers,
        )

        results: dict[int, list[Point]] = {}
        next_index = 0

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            pending_futures = {
                executor.submit(
                    process_path, path.to_dict(), plan.accuracy, plan.distance
                ): index
                for index, path in enumerate(paths)
            }

            try:
                for future in as_completed(pending_futures):
                    index = pending_futures.pop(future)
                    results[index] = [Point(x, y) for x, y in future.result()]

                    while next_index in results:
                        yield results.pop(next_index)
                        next_index += 1
            except BaseException:
                for f in pending_futures:
                    f.cancel()
                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def process(
        self,
        svg_data: bytes,
        sink: BinaryIO,
        source: str = "<stdin>",
        target: str = "<stdout>",
    ) -> ProcessingStats:
        """Convert an SVG document into a point stream.

        Args:
            svg_data: Raw SVG document
            sink: Binary output sink
            source: Document name for messages
            target: Output name for messages

        Returns:
            ProcessingStats with counts and timing

        Raises:
            DocumentError: If the document cannot be parsed
            InvalidConfigurationError: If the sampling settings are invalid
            OutputWriteError: If the sink fails
        """
        self.processing_logger = ProcessingLogger(self.logger)
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        self.logger.info("Starting conversion", input=source)

        reader = SvgReader(svg_data, source=source)
        reader.load()
        paths = reader.read_paths(on_skip=self.processing_logger.log_element_skipped)

        self.processing_logger.log_document(
            width=reader.width,
            height=reader.height,
            path_count=len(paths),
        )

        plan = self.plan(paths)
        self.processing_logger.log_sampling_plan(plan.distance, plan.accuracy)

        flip_height = reader.flip_height if self.config.output.flip_y else None
        writer = PointWriter(sink, flip_height=flip_height, target=target)

        for path, points in zip(paths, self.sample(paths, plan)):
            writer.write_points(points)
            self.processing_logger.log_path_complete(path.source, len(points))

        writer.flush()
        stats.end_time = time.time()

        self.logger.info(
            "Conversion complete",
            paths=stats.paths_sampled,
            skipped=stats.skipped_count,
            points=stats.points_written,
            duration_seconds=round(stats.duration_seconds, 3),
        )

        return stats
