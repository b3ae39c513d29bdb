from __future__ import annotations

from typing import List

from .models import Process, ScheduleResult, SystemMetrics


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute busy/idle time, throughput and CPU utilization from the completed
    processes and the timeline of a schedule, and attach them to the result.
    """
    finished = [p for p in result.processes if p.completion_time is not None]
    if not finished:
        system = SystemMetrics(cpu_busy_time=0, makespan=0, idle_time=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = max(p.completion_time for p in finished)
    cpu_busy_time = sum(slice_.duration for slice_ in result.timeline)

    throughput = len(finished) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    # Heuristic: a process waited "too long" when it waited more than twice the average.
    avg_wait = sum(p.waiting_time for p in finished) / len(finished)
    starvation_count = sum(1 for p in finished if p.waiting_time > 2 * avg_wait)

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        makespan=makespan,
        idle_time=makespan - cpu_busy_time,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
        starvation_count=starvation_count,
    )
    result.system = system
    return system


def summarize_process_metrics(processes: List[Process]) -> dict:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    finished = [p for p in processes if p.completion_time is not None]
    if not finished:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}

    n = len(finished)
    return {
        "avg_waiting": sum(p.waiting_time for p in finished) / n,
        "avg_turnaround": sum(p.turnaround_time for p in finished) / n,
        "avg_response": sum(p.response_time for p in finished) / n,
    }
