from __future__ import annotations

from typing import Any, Sequence

from .models import Process


class WorkloadValidationError(ValueError):
    """
    Raised when a process descriptor cannot be scheduled.

    Carries the offending process id and field name so callers can report
    exactly which entry of the workload is broken.
    """

    def __init__(self, pid: int, field: str, value: Any, reason: str) -> None:
        self.pid = pid
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Process {pid}: {field}={value!r} {reason}")


def validate_processes(processes: Sequence[Process]) -> None:
    for p in processes:
        if p.arrival_time < 0:
            raise WorkloadValidationError(p.pid, "arrival_time", p.arrival_time, "must be >= 0")
        if p.burst_time <= 0:
            raise WorkloadValidationError(p.pid, "burst_time", p.burst_time, "must be > 0")
