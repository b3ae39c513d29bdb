from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional

from .errors import InvalidConfiguration, ResourceExhaustion
from .metrics import compute_system_metrics
from .models import Process, ScheduleResult, ScheduledSlice

logger = logging.getLogger(__name__)


def _prepare(processes: List[Process], algorithm: str) -> List[Process]:
    """
    Return fresh copies of ``processes`` for one scheduler run.

    The copies are the run's private working buffer, so the caller's records
    are never mutated and repeated runs on the same input cannot interfere.
    """
    seen: set[str] = set()
    for p in processes:
        if p.pid in seen:
            raise InvalidConfiguration(f"Duplicate process id {p.pid!r} in workload")
        seen.add(p.pid)

    try:
        return [replace(p) for p in processes]
    except MemoryError as exc:
        raise ResourceExhaustion(
            f"{algorithm}: could not allocate working state for {len(processes)} processes"
        ) from exc


def _record_slice(timeline: List[ScheduledSlice], pid: str, start: int, end: int) -> None:
    # Merge with the previous slice when the same process simply keeps running.
    if timeline and timeline[-1].pid == pid and timeline[-1].end_time == start:
        timeline[-1].end_time = end
    else:
        timeline.append(ScheduledSlice(pid=pid, start_time=start, end_time=end))


def _finish(result: ScheduleResult) -> ScheduleResult:
    system = compute_system_metrics(result)
    logger.info(
        "%s finished %d processes: makespan=%d busy=%d idle=%d",
        result.algorithm,
        len(result.processes),
        system.makespan,
        system.cpu_busy_time,
        system.idle_time,
    )
    return result


def schedule_priority(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority. Processes run strictly
    in ``(priority, arrival_time, input index)`` order; when the next process
    in that order has not arrived yet the CPU idles until it does. The order is
    fixed up front, so a later-arriving high-priority process still runs before
    an earlier-arriving low-priority one.
    """
    work = _prepare(processes, "Priority")
    timeline: List[ScheduledSlice] = []

    ordered = sorted(
        enumerate(work),
        key=lambda item: (item[1].priority, item[1].arrival_time, item[0]),
    )

    time = 0
    for _, p in ordered:
        if time < p.arrival_time:
            logger.debug("Priority: CPU idle from %d to %d waiting for %s", time, p.arrival_time, p.pid)
            time = p.arrival_time

        start_time = time
        time = p.execute(start_time, p.burst_time)
        p.complete(time)
        _record_slice(timeline, p.pid, start_time, time)
        logger.debug("Priority: %s ran %d-%d (priority %d)", p.pid, start_time, time, p.priority)

    result = ScheduleResult(algorithm="Priority (non-preemptive)", quantum=None, processes=work, timeline=timeline)
    return _finish(result)


def schedule_srtf(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Remaining Time First (preemptive SJF).

    The clock advances one unit at a time. Each unit goes to the arrived,
    unfinished process with the least remaining burst, ties going to the
    process listed first. A unit with nothing eligible is idle time.
    """
    work = _prepare(processes, "SRTF")
    timeline: List[ScheduledSlice] = []

    time = 0
    idle_units = 0
    completed = 0
    while completed < len(work):
        ready = [i for i, p in enumerate(work) if p.arrival_time <= time and p.remaining_burst > 0]
        if not ready:
            idle_units += 1
            time += 1
            continue

        index = min(ready, key=lambda i: (work[i].remaining_burst, i))
        current = work[index]

        start_time = time
        time = current.execute(start_time, 1)
        _record_slice(timeline, current.pid, start_time, time)

        if current.remaining_burst == 0:
            current.complete(time)
            completed += 1
            logger.debug("SRTF: %s completed at %d", current.pid, time)

    logger.debug("SRTF: %d idle units over %d elapsed", idle_units, time)

    result = ScheduleResult(algorithm="SRTF", quantum=None, processes=work, timeline=timeline)
    return _finish(result)


def schedule_rr(
    processes: List[Process],
    quantum: Optional[int] = None,
    gate_arrivals: bool = True,
) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes are visited in a fixed cyclic order (their input order). Each
    visit runs an unfinished process for at most ``quantum`` units; scans
    repeat until every process has completed.

    With ``gate_arrivals`` (the default) a process is skipped until its
    arrival time has been reached, and the clock jumps to the next arrival when
    a whole scan finds nothing runnable. With ``gate_arrivals=False`` every
    process is treated as present from time 0, which can produce negative
    waiting times for late arrivals.
    """
    if quantum is None or not isinstance(quantum, int) or isinstance(quantum, bool) or quantum <= 0:
        raise InvalidConfiguration(f"Round Robin requires a positive integer quantum (use --quantum), got {quantum!r}")

    work = _prepare(processes, "Round Robin")
    timeline: List[ScheduledSlice] = []

    time = 0
    while True:
        pending = False
        dispatched = False

        for p in work:
            if p.remaining_burst <= 0:
                continue
            pending = True
            if gate_arrivals and p.arrival_time > time:
                continue

            run_time = min(quantum, p.remaining_burst)
            start_time = time
            time = p.execute(start_time, run_time)
            _record_slice(timeline, p.pid, start_time, time)
            dispatched = True

            if p.remaining_burst == 0:
                p.complete(time)
                logger.debug("RR: %s completed at %d", p.pid, time)
                if p.waiting_time < 0:
                    logger.warning(
                        "RR: %s has negative waiting time %d (ran before arriving at %d; arrival gating is off)",
                        p.pid,
                        p.waiting_time,
                        p.arrival_time,
                    )

        if not pending:
            break

        if not dispatched:
            next_arrival = min(p.arrival_time for p in work if p.remaining_burst > 0)
            logger.debug("RR: CPU idle from %d to %d", time, next_arrival)
            time = next_arrival

    algorithm = "Round Robin" if gate_arrivals else "Round Robin (arrivals ignored)"
    result = ScheduleResult(algorithm=algorithm, quantum=quantum, processes=work, timeline=timeline)
    return _finish(result)


ALGORITHMS = {
    "priority": schedule_priority,
    "srtf": schedule_srtf,
    "rr": schedule_rr,
}


def run_algorithm(
    name: str,
    processes: List[Process],
    quantum: Optional[int] = None,
    gate_arrivals: bool = True,
) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. The quantum and arrival gating only
    affect Round Robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise InvalidConfiguration(f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})")

    if name == "rr":
        return schedule_rr(processes, quantum=quantum, gate_arrivals=gate_arrivals)
    return ALGORITHMS[name](processes, quantum=quantum)
