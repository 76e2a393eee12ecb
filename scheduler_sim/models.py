from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass
class SimProcess:
    """
    Mutable working copy of a Process used by a single simulation run.
    """

    pid: int
    arrival_time: int
    burst_time: int
    priority: int
    remaining_time: int
    completion_time: Optional[int] = None
    turnaround_time: Optional[int] = None
    waiting_time: Optional[int] = None

    @classmethod
    def from_process(cls, process: Process) -> "SimProcess":
        return cls(
            pid=process.pid,
            arrival_time=process.arrival_time,
            burst_time=process.burst_time,
            priority=process.priority,
            remaining_time=process.burst_time,
        )

    @property
    def finished(self) -> bool:
        return self.completion_time is not None

    def finish(self, clock: int) -> "ProcessMetrics":
        self.completion_time = clock
        self.turnaround_time = clock - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time
        return ProcessMetrics(
            pid=self.pid,
            priority=self.priority,
            burst_time=self.burst_time,
            arrival_time=self.arrival_time,
            waiting_time=self.waiting_time,
            turnaround_time=self.turnaround_time,
            completion_time=self.completion_time,
        )


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class ProcessMetrics:
    pid: int
    priority: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int


@dataclass
class SystemMetrics:
    avg_waiting: float
    avg_turnaround: float
    throughput: float
    makespan: int = 0
    cpu_busy_time: int = 0
    cpu_utilization: float = 0.0


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[ProcessMetrics] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None
