from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InvalidConfiguration, SchedulerError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Process:
    """
    One simulated process.

    ``pid``, ``arrival_time``, ``burst_time`` and ``priority`` describe the
    workload and are never changed by a scheduler. The remaining fields are
    working state and outputs, filled in as the process runs.
    """

    pid: str
    arrival_time: int
    burst_time: int
    priority: int = 0

    remaining_burst: int = field(init=False, default=0)
    start_time: Optional[int] = field(init=False, default=None)
    completion_time: Optional[int] = field(init=False, default=None)
    waiting_time: Optional[int] = field(init=False, default=None)
    turnaround_time: Optional[int] = field(init=False, default=None)

    def __post_init__(self) -> None:
        if not _is_int(self.burst_time) or self.burst_time <= 0:
            raise InvalidConfiguration(
                f"Process {self.pid!r}: burst time must be a positive integer, got {self.burst_time!r}"
            )
        if not _is_int(self.arrival_time) or self.arrival_time < 0:
            raise InvalidConfiguration(
                f"Process {self.pid!r}: arrival time must be a non-negative integer, got {self.arrival_time!r}"
            )
        if not _is_int(self.priority):
            raise InvalidConfiguration(
                f"Process {self.pid!r}: priority must be an integer, got {self.priority!r}"
            )
        self.reset()

    def reset(self) -> None:
        """Forget any previous run so the record can be scheduled again."""
        self.remaining_burst = self.burst_time
        self.start_time = None
        self.completion_time = None
        self.waiting_time = None
        self.turnaround_time = None

    @property
    def is_complete(self) -> bool:
        return self.remaining_burst == 0

    @property
    def response_time(self) -> Optional[int]:
        if self.start_time is None:
            return None
        return self.start_time - self.arrival_time

    def execute(self, start: int, duration: int) -> int:
        """
        Run for ``duration`` units beginning at ``start`` and return the end
        time. The first call records the dispatch time.
        """
        if duration <= 0 or duration > self.remaining_burst:
            raise SchedulerError(
                f"Process {self.pid}: cannot run {duration} units with {self.remaining_burst} remaining"
            )
        if self.start_time is None:
            self.start_time = start
        self.remaining_burst -= duration
        return start + duration

    def complete(self, time: int) -> None:
        if self.completion_time is not None:
            raise SchedulerError(f"Process {self.pid} already completed at {self.completion_time}")
        self.remaining_burst = 0
        self.completion_time = time
        self.turnaround_time = time - self.arrival_time
        self.waiting_time = self.turnaround_time - self.burst_time


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: str
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    idle_time: int
    throughput: float
    cpu_utilization: float
    starvation_count: int = 0


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[Process] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    system: Optional[SystemMetrics] = None

    @property
    def execution_order(self) -> List[str]:
        """Pids in the order they were first dispatched."""
        seen: List[str] = []
        for slice_ in self.timeline:
            if slice_.pid not in seen:
                seen.append(slice_.pid)
        return seen

    @property
    def completion_order(self) -> List[str]:
        done = [p for p in self.processes if p.completion_time is not None]
        return [p.pid for p in sorted(done, key=lambda p: p.completion_time)]

    def get(self, pid: str) -> Process:
        for p in self.processes:
            if p.pid == pid:
                return p
        raise KeyError(pid)
