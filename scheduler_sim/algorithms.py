from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Sequence, Union

from .metrics import compute_system_metrics
from .models import Process, ProcessMetrics, ScheduledSlice, ScheduleResult, SimProcess
from .policies import Policy, priority_order, remaining_time_order
from .queues import ArrivalQueue, ReadyQueue
from .validation import validate_processes

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2


class Algorithm(str, Enum):
    FCFS = "fcfs"
    SJF = "sjf"
    PRIORITY = "priority"
    RR = "rr"


TITLES = {
    Algorithm.FCFS: "First-come, first-serve",
    Algorithm.SJF: "Shortest-job-first",
    Algorithm.PRIORITY: "Priority",
    Algorithm.RR: "Round-robin",
}


def schedule_fcfs(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Input order is taken as execution order; callers hand processes over
    already sorted by arrival. Waiting time is recomputed for every process
    as ``max(0, clock - arrival)``.
    """
    validate_processes(processes)
    logger.debug("FCFS: scheduling %d processes", len(processes))

    time = 0
    timeline: List[ScheduledSlice] = []
    metrics: List[ProcessMetrics] = []

    for p in processes:
        sim = SimProcess.from_process(p)
        waiting_time = max(0, time - p.arrival_time)
        start_time = p.arrival_time + waiting_time
        end_time = start_time + p.burst_time

        sim.remaining_time = 0
        metrics.append(sim.finish(end_time))
        timeline.append(ScheduledSlice(pid=p.pid, start_time=start_time, end_time=end_time))

        time = end_time

    result = ScheduleResult(algorithm=TITLES[Algorithm.FCFS], quantum=None, processes=metrics, timeline=timeline)
    compute_system_metrics(result)
    return result


def _extend_timeline(timeline: List[ScheduledSlice], pid: int, time: int) -> None:
    # Merge the tick ending at ``time`` into the previous slice when contiguous.
    if timeline and timeline[-1].pid == pid and timeline[-1].end_time == time - 1:
        timeline[-1].end_time = time
    else:
        timeline.append(ScheduledSlice(pid=pid, start_time=time - 1, end_time=time))


def _run_preemptive(processes: Sequence[Process], policy: Policy, title: str) -> ScheduleResult:
    """
    Tick-stepped preemptive scheduler shared by SRTF and Priority.

    Each tick the head of the ready queue runs for one unit, then completion
    is checked, then processes arriving at the new clock are admitted. An
    arrival preempts the running process only when ``policy`` says it must
    run first.
    """
    validate_processes(processes)
    logger.debug("%s: scheduling %d processes", title, len(processes))

    pending = ArrivalQueue(SimProcess.from_process(p) for p in processes)
    ready = ReadyQueue(policy)

    time = 0
    timeline: List[ScheduledSlice] = []
    metrics: List[ProcessMetrics] = []

    while ready or pending:
        if not ready:
            next_arrival = pending.next_arrival()
            if next_arrival > time:
                logger.debug("%s: CPU idle from %d to %d", title, time, next_arrival)
                time = next_arrival
            for p in pending.pop_arrived(time):
                ready.push(p)
            continue

        current = ready.head()
        current.remaining_time -= 1
        time += 1
        _extend_timeline(timeline, current.pid, time)

        if current.remaining_time == 0:
            ready.pop_head()
            metrics.append(current.finish(time))
            logger.debug("%s: process %d completed at %d", title, current.pid, time)

        for p in pending.pop_arrived(time):
            if ready.push(p) == 0 and not current.finished:
                logger.debug("%s: process %d preempts %d at %d", title, p.pid, current.pid, time)

    result = ScheduleResult(algorithm=title, quantum=None, processes=metrics, timeline=timeline)
    compute_system_metrics(result)
    return result


def schedule_sjf(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First in its preemptive form (shortest remaining time first).
    """
    return _run_preemptive(processes, remaining_time_order, TITLES[Algorithm.SJF])


def schedule_priority(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Preemptive Priority scheduling.

    Lower numeric priority value means higher priority; ties go to the
    shorter burst, then the earlier arrival.
    """
    return _run_preemptive(processes, priority_order, TITLES[Algorithm.PRIORITY])


def schedule_rr(processes: Sequence[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    A process that does not finish within its quantum goes to the back of
    the queue ahead of processes that arrived while it was running. Every
    quantum produces its own timeline slice.
    """
    if quantum is None:
        quantum = DEFAULT_QUANTUM
    if quantum <= 0:
        raise ValueError("Round Robin requires a positive quantum (use --quantum)")

    validate_processes(processes)
    logger.debug("Round-robin: scheduling %d processes with quantum %d", len(processes), quantum)

    pending = ArrivalQueue(SimProcess.from_process(p) for p in processes)
    ready: Deque[SimProcess] = deque()

    time = 0
    timeline: List[ScheduledSlice] = []
    metrics: List[ProcessMetrics] = []

    while ready or pending:
        ready.extend(pending.pop_arrived(time))

        if not ready:
            next_arrival = pending.next_arrival()
            if next_arrival is None:
                break
            logger.debug("Round-robin: CPU idle from %d to %d", time, next_arrival)
            time = next_arrival
            continue

        current = ready.popleft()
        run_time = min(current.remaining_time, quantum)
        timeline.append(ScheduledSlice(pid=current.pid, start_time=time, end_time=time + run_time))

        time += run_time
        current.remaining_time -= run_time

        if current.remaining_time == 0:
            metrics.append(current.finish(time))
            logger.debug("Round-robin: process %d completed at %d", current.pid, time)
        else:
            ready.append(current)

    result = ScheduleResult(algorithm=TITLES[Algorithm.RR], quantum=quantum, processes=metrics, timeline=timeline)
    compute_system_metrics(result)
    return result


ALGORITHMS = {
    Algorithm.FCFS: schedule_fcfs,
    Algorithm.SJF: schedule_sjf,
    Algorithm.PRIORITY: schedule_priority,
    Algorithm.RR: schedule_rr,
}


def run_algorithm(
    name: Union[str, Algorithm],
    processes: Sequence[Process],
    quantum: Optional[int] = None,
) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum is only used by round-robin.
    """
    try:
        algorithm = Algorithm(name.lower())
    except ValueError:
        raise ValueError(f"Unknown algorithm '{name}' (choose from {', '.join(a.value for a in Algorithm)})") from None

    func = ALGORITHMS[algorithm]
    return func(processes, quantum=quantum)
