"""Report safety rule and the single-removal dampener.

A report is *safe* when its levels are strictly increasing or strictly
decreasing and every adjacent step is at most ``max_step`` in magnitude.
With the dampener enabled a report also counts as safe if removing exactly
one level makes it safe. The dampener is a brute-force search over all
removal positions, which is O(n^2) per report and fine for short reports.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from .config import DEFAULT_MAX_STEP, ValidatorConfig
from .models import Report, Reports, build_reports

logger = logging.getLogger(__name__)

ReportLike = Union[Report, Sequence[int]]


def _as_levels(report: ReportLike) -> NDArray[np.object_]:
    # python ints: levels are unbounded and steps must not wrap
    return np.array([int(x) for x in report], dtype=object)


def _is_safe_levels(levels: NDArray[np.object_], max_step: int) -> bool:
    steps = np.diff(levels)
    all_increasing = bool(np.all(steps > 0))
    all_decreasing = bool(np.all(steps < 0))
    distances_valid = bool(np.all(np.abs(steps) <= max_step))
    return (all_increasing or all_decreasing) and distances_valid


def is_safe(report: ReportLike, max_step: int = DEFAULT_MAX_STEP) -> bool:
    """Strict rule; reports with fewer than two levels are always safe."""
    return _is_safe_levels(_as_levels(report), max_step)


def is_safe_dampened(report: ReportLike, max_step: int = DEFAULT_MAX_STEP) -> bool:
    """Strict rule, or strict rule after removing any single level."""
    levels = _as_levels(report)
    for idx in range(levels.size):
        if _is_safe_levels(np.delete(levels, idx), max_step):
            return True
    return _is_safe_levels(levels, max_step)


def count_safe(
    reports: Union[Reports, Iterable[ReportLike]],
    max_step: int = DEFAULT_MAX_STEP,
    dampener: bool = True,
) -> int:
    """Number of reports that pass the (dampened, by default) safety rule."""
    check = is_safe_dampened if dampener else is_safe
    safe_count = 0
    for idx, report in enumerate(reports):
        ok = check(report, max_step)
        logger.debug("report %d safe=%s", idx, ok)
        if ok:
            safe_count += 1
    return safe_count


class ReportValidator:
    """Safety checks bound to a :class:`ValidatorConfig`."""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig()

    def is_safe(self, report: ReportLike) -> bool:
        return is_safe(report, self.config.max_step)

    def is_safe_dampened(self, report: ReportLike) -> bool:
        return is_safe_dampened(report, self.config.max_step)

    def count_safe(self, reports: Union[Reports, Iterable[ReportLike]]) -> int:
        reports = list(reports)
        safe_count = count_safe(reports, self.config.max_step, self.config.dampener)
        logger.info(
            "%d/%d reports safe (max_step=%d, dampener=%s)",
            safe_count,
            len(reports),
            self.config.max_step,
            self.config.dampener,
        )
        return safe_count


__all__ = ["ReportValidator", "count_safe", "is_safe", "is_safe_dampened"]


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s][%(levelname)s] %(name)s: %(message)s",
    )
    sample = build_reports([[1, 2, 3], [4, 4, 4], [7, 8, 9]])
    ReportValidator().count_safe(sample)
