from __future__ import annotations

from typing import Iterable, List, Optional

from .models import SimProcess
from .policies import Policy, arrival_order, sort_by


class ArrivalQueue:
    """
    Processes that have not arrived yet, sorted once by arrival order.
    """

    def __init__(self, processes: Iterable[SimProcess]) -> None:
        self._processes: List[SimProcess] = sort_by(processes, arrival_order)

    def __len__(self) -> int:
        return len(self._processes)

    def next_arrival(self) -> Optional[int]:
        return self._processes[0].arrival_time if self._processes else None

    def pop_arrived(self, clock: int) -> List[SimProcess]:
        """Remove and return, in arrival order, every process arrived by ``clock``."""
        count = 0
        while count < len(self._processes) and self._processes[count].arrival_time <= clock:
            count += 1
        arrived = self._processes[:count]
        del self._processes[:count]
        return arrived


class ReadyQueue:
    """
    Arrived processes kept ordered by a policy; the head runs next.
    """

    def __init__(self, policy: Policy) -> None:
        self.policy = policy
        self._processes: List[SimProcess] = []

    def __len__(self) -> int:
        return len(self._processes)

    def push(self, process: SimProcess) -> int:
        """
        Insert ``process`` before the first queued process it must run
        before, and return the index it landed at. Ties keep queue order.
        """
        for idx, queued in enumerate(self._processes):
            if self.policy(process, queued):
                self._processes.insert(idx, process)
                return idx
        self._processes.append(process)
        return len(self._processes) - 1

    def head(self) -> Optional[SimProcess]:
        return self._processes[0] if self._processes else None

    def pop_head(self) -> SimProcess:
        return self._processes.pop(0)
