import threading

from fuelflux.offline_queue import OfflineQueue, QueueItem


def _item(n: int) -> QueueItem:
    return QueueItem("POST", "/api/pump/refuel", {"TankNumber": n}, "token")


def test_new_queue_is_empty():
    queue = OfflineQueue()
    assert queue.empty() is True
    assert len(queue) == 0


def test_try_pop_on_empty_returns_none():
    assert OfflineQueue().try_pop() is None


def test_fifo_order():
    queue = OfflineQueue()
    items = [_item(n) for n in range(5)]
    for item in items:
        queue.enqueue(item)
    popped = []
    while (item := queue.try_pop()) is not None:
        popped.append(item)
    assert popped == items
    assert queue.empty() is True


def test_len_tracks_enqueue_and_pop():
    queue = OfflineQueue()
    queue.enqueue(_item(1))
    queue.enqueue(_item(2))
    assert len(queue) == 2
    assert queue.empty() is False
    assert queue.try_pop() == _item(1)
    assert len(queue) == 1


def test_requeued_item_goes_to_back():
    queue = OfflineQueue()
    queue.enqueue(_item(1))
    queue.enqueue(_item(2))
    first = queue.try_pop()
    queue.enqueue(first)
    assert queue.try_pop() == _item(2)
    assert queue.try_pop() == _item(1)


def test_item_defaults():
    item = QueueItem("GET", "/health")
    assert item.body == {}
    assert item.token == ""


def test_concurrent_enqueue_keeps_every_item():
    queue = OfflineQueue()

    def worker(start: int) -> None:
        for n in range(start, start + 100):
            queue.enqueue(_item(n))

    threads = [threading.Thread(target=worker, args=(k * 100,)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(queue) == 400
    numbers = set()
    while (item := queue.try_pop()) is not None:
        numbers.add(item.body["TankNumber"])
    assert numbers == set(range(400))