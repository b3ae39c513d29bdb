"""
CPU scheduling simulator.

Runs non-preemptive Priority, preemptive Shortest-Remaining-Time-First and
Round Robin scheduling over a fixed workload and reports per-process waiting
and turnaround times.
"""

from .algorithms import ALGORITHMS, run_algorithm, schedule_priority, schedule_rr, schedule_srtf
from .errors import InvalidConfiguration, ResourceExhaustion, SchedulerError
from .models import Process, ScheduledSlice, ScheduleResult, SystemMetrics

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "InvalidConfiguration",
    "Process",
    "ResourceExhaustion",
    "ScheduleResult",
    "ScheduledSlice",
    "SchedulerError",
    "SystemMetrics",
    "run_algorithm",
    "schedule_priority",
    "schedule_rr",
    "schedule_srtf",
]
