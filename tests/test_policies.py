from dataclasses import replace

from scheduler_sim.models import Process, SimProcess
from scheduler_sim.policies import arrival_order, priority_order, remaining_time_order, sort_by
from scheduler_sim.queues import ArrivalQueue, ReadyQueue


def _sim(pid, arrival, burst, priority=0, remaining=None):
    sim = SimProcess.from_process(Process(pid, arrival, burst, priority))
    if remaining is not None:
        sim.remaining_time = remaining
    return sim


def test_arrival_order():
    assert arrival_order(_sim(1, 0, 9), _sim(2, 1, 1))
    assert arrival_order(_sim(1, 2, 3), _sim(2, 2, 4))
    assert not arrival_order(_sim(1, 2, 4), _sim(2, 2, 4))


def test_remaining_time_order():
    assert remaining_time_order(_sim(1, 5, 9, remaining=2), _sim(2, 0, 3))
    assert remaining_time_order(_sim(1, 0, 9, remaining=3), _sim(2, 1, 3))
    assert not remaining_time_order(_sim(2, 1, 3), _sim(1, 0, 9, remaining=3))


def test_priority_order():
    assert priority_order(_sim(1, 9, 9, priority=1), _sim(2, 0, 1, priority=2))
    assert priority_order(_sim(1, 9, 2, priority=1), _sim(2, 0, 3, priority=1))
    assert priority_order(_sim(1, 0, 3, priority=1), _sim(2, 1, 3, priority=1))
    assert not priority_order(_sim(1, 0, 3, priority=1), _sim(2, 0, 3, priority=1))


def test_policies_do_not_mutate():
    a, b = _sim(1, 0, 4), _sim(2, 1, 2)
    before = (replace(a), replace(b))
    arrival_order(a, b)
    remaining_time_order(a, b)
    priority_order(a, b)
    assert (a, b) == before


def test_sort_by_is_stable():
    procs = [_sim(1, 3, 2), _sim(2, 0, 5), _sim(3, 3, 2), _sim(4, 3, 1)]
    assert [p.pid for p in sort_by(procs, arrival_order)] == [2, 4, 1, 3]


def test_arrival_queue_pops_in_order():
    queue = ArrivalQueue([_sim(1, 4, 1), _sim(2, 0, 3), _sim(3, 2, 2), _sim(4, 2, 1)])
    assert queue.next_arrival() == 0
    assert [p.pid for p in queue.pop_arrived(2)] == [2, 4, 3]
    assert len(queue) == 1
    assert queue.pop_arrived(3) == []
    assert queue.next_arrival() == 4
    assert [p.pid for p in queue.pop_arrived(10)] == [1]
    assert queue.next_arrival() is None


def test_ready_queue_push_positions():
    ready = ReadyQueue(remaining_time_order)
    assert ready.head() is None
    assert ready.push(_sim(1, 0, 5)) == 0
    assert ready.push(_sim(2, 1, 5)) == 1
    assert ready.push(_sim(3, 2, 2)) == 0
    assert [ready.pop_head().pid for _ in range(len(ready))] == [3, 1, 2]
    assert not ready
