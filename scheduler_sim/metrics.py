from __future__ import annotations

from typing import List

from .models import ProcessMetrics, ScheduleResult, SystemMetrics


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute averages, throughput and CPU utilization given populated
    per-process metrics and timeline slices.
    """
    if not result.processes:
        system = SystemMetrics(avg_waiting=0.0, avg_turnaround=0.0, throughput=0.0)
        result.system = system
        return system

    summary = summarize_process_metrics(result.processes)
    makespan = max(p.completion_time for p in result.processes)
    cpu_busy_time = sum(slice_.duration for slice_ in result.timeline)

    throughput = len(result.processes) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    system = SystemMetrics(
        avg_waiting=summary["avg_waiting"],
        avg_turnaround=summary["avg_turnaround"],
        throughput=throughput,
        makespan=makespan,
        cpu_busy_time=cpu_busy_time,
        cpu_utilization=cpu_utilization,
    )
    result.system = system
    return system


def summarize_process_metrics(processes: List[ProcessMetrics]) -> dict:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
    }
