"""Report containers.

A :class:`Report` is an ordered list of levels and a :class:`Reports`
collection is an ordered list of reports. Both are thin wrappers that keep
their backing ``list`` public and forward the usual sequence operations to it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Union

Level = int


@dataclass
class Report:
    levels: List[Level] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.levels)

    def __iter__(self) -> Iterator[Level]:
        return iter(self.levels)

    def __getitem__(self, idx: int) -> Level:
        return self.levels[idx]

    def __setitem__(self, idx: int, value: Level) -> None:
        self.levels[idx] = int(value)

    def append(self, level: Level) -> None:
        self.levels.append(int(level))

    def copy(self) -> "Report":
        return Report(list(self.levels))

    def without(self, idx: int) -> "Report":
        """Return a new report with the level at ``idx`` removed."""
        sub = self.copy()
        del sub.levels[idx]
        return sub


def _as_report(report: Union[Report, Sequence[int]]) -> Report:
    if isinstance(report, Report):
        return report
    return Report([int(x) for x in report])


@dataclass
class Reports:
    reports: List[Report] = field(default_factory=list)

    @classmethod
    def new(cls) -> "Reports":
        return cls()

    @classmethod
    def from_levels(cls, data: Iterable[Sequence[int]]) -> "Reports":
        """Build a collection with one report per inner sequence, in order."""
        reports = cls()
        for levels in data:
            reports.append(Report([int(x) for x in levels]))
        return reports

    def __len__(self) -> int:
        return len(self.reports)

    def __iter__(self) -> Iterator[Report]:
        return iter(self.reports)

    def __getitem__(self, idx: int) -> Report:
        return self.reports[idx]

    def __setitem__(self, idx: int, report: Union[Report, Sequence[int]]) -> None:
        self.reports[idx] = _as_report(report)

    def append(self, report: Union[Report, Sequence[int]]) -> None:
        self.reports.append(_as_report(report))

    def is_empty(self) -> bool:
        return not self.reports

    def to_levels(self) -> List[List[Level]]:
        return [list(report.levels) for report in self.reports]


def build_reports(data: Iterable[Sequence[int]]) -> Reports:
    return Reports.from_levels(data)


__all__ = ["Level", "Report", "Reports", "build_reports"]
