"""
Ordering policies used to decide which process runs next.

Each policy is a pure predicate ``policy(a, b)`` that answers whether ``a``
must run before ``b``. Policies never mutate the processes they compare.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable, List

from .models import SimProcess

Policy = Callable[[SimProcess, SimProcess], bool]


def arrival_order(a: SimProcess, b: SimProcess) -> bool:
    """Earlier arrival first; shorter burst breaks ties."""
    if a.arrival_time != b.arrival_time:
        return a.arrival_time < b.arrival_time
    return a.burst_time < b.burst_time


def remaining_time_order(a: SimProcess, b: SimProcess) -> bool:
    """Less remaining work first; earlier arrival breaks ties."""
    if a.remaining_time != b.remaining_time:
        return a.remaining_time < b.remaining_time
    return a.arrival_time < b.arrival_time


def priority_order(a: SimProcess, b: SimProcess) -> bool:
    """Lower priority value first, then shorter burst, then earlier arrival."""
    if a.priority != b.priority:
        return a.priority < b.priority
    if a.burst_time != b.burst_time:
        return a.burst_time < b.burst_time
    return a.arrival_time < b.arrival_time


def sort_by(processes: Iterable[SimProcess], policy: Policy) -> List[SimProcess]:
    """
    Stable sort driven by a policy predicate. Processes the policy cannot
    tell apart keep their input order.
    """

    def compare(a: SimProcess, b: SimProcess) -> int:
        if policy(a, b):
            return -1
        if policy(b, a):
            return 1
        return 0

    return sorted(processes, key=cmp_to_key(compare))
