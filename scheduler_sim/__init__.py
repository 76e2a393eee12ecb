"""
Scheduler simulation package.

Simulates FCFS, preemptive SJF (SRTF), preemptive Priority and Round-robin
scheduling over a fixed set of processes and reports per-process timing
metrics together with the execution timeline.
"""

from .algorithms import ALGORITHMS, Algorithm, run_algorithm
from .models import Process, ScheduleResult
from .validation import WorkloadValidationError

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "Process",
    "ScheduleResult",
    "WorkloadValidationError",
    "run_algorithm",
]
