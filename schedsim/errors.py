from __future__ import annotations


class SchedulerError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidConfiguration(SchedulerError, ValueError):
    """
    A workload or scheduler argument that cannot be simulated: non-positive
    burst time, negative arrival time, bad quantum, duplicate pid, unknown
    algorithm or a malformed workload file.
    """


class ResourceExhaustion(SchedulerError):
    """A working buffer for a scheduler run could not be allocated."""
