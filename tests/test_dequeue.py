from dataclasses import dataclass

import pytest

from egoskit.dequeue import Queue, QueueError

TIMES = 100


@dataclass(eq=False)
class Item:
    data: int


def make_items(count):
    return [Item(i) for i in range(1, count + 1)]


def data_of(items):
    return [item.data for item in items]


def test_prepend():
    queue = Queue()
    items = make_items(TIMES)
    for item in items:
        queue.prepend(item)
    assert data_of(reversed(queue)) == list(range(1, TIMES + 1))
    assert data_of(queue) == list(range(TIMES, 0, -1))
    assert len(queue) == TIMES
    remaining = TIMES
    while len(queue):
        queue.dequeue()
        remaining -= 1
        assert len(queue) == remaining
    queue.free()
    assert len(queue) == 0


def test_append():
    queue = Queue()
    for item in make_items(TIMES):
        queue.append(item)
    assert data_of(queue) == list(range(1, TIMES + 1))
    assert data_of(reversed(queue)) == list(range(TIMES, 0, -1))
    assert len(queue) == TIMES
    remaining = TIMES
    while len(queue):
        queue.dequeue()
        remaining -= 1
        assert len(queue) == remaining
    queue.free()
    assert len(queue) == 0


def test_dequeue_order():
    queue = Queue()
    for count, item in enumerate(make_items(TIMES), start=1):
        queue.append(item)
        assert len(queue) == count
    expected = 1
    remaining = TIMES
    while len(queue):
        item = queue.dequeue()
        remaining -= 1
        assert len(queue) == remaining
        assert item.data == expected
        expected += 1
    queue.free()
    assert expected == TIMES + 1


def test_over_dequeue():
    queue = Queue()
    item = Item(1)
    queue.append(item)
    assert queue.dequeue() is item
    with pytest.raises(QueueError):
        queue.dequeue()


def test_free_nonempty_raises():
    queue = Queue()
    for count, item in enumerate(make_items(TIMES), start=1):
        queue.append(item)
        assert len(queue) == count
    with pytest.raises(QueueError):
        queue.free()


def test_free_after_draining():
    queue = Queue()
    for item in make_items(TIMES):
        queue.append(item)
    drained = [queue.dequeue() for _ in range(TIMES)]
    queue.free()
    assert data_of(drained) == list(range(1, TIMES + 1))


def test_one_iterate():
    queue = Queue()
    queue.append(Item(1))
    seen = []
    queue.iterate(lambda item, arg: seen.append((item.data, arg)), "x")
    assert seen == [(1, "x")]


def test_iterate():
    queue = Queue()
    for count, item in enumerate(make_items(TIMES), start=1):
        queue.append(item)
        assert len(queue) == count
    seen = []
    queue.iterate(lambda item, arg: arg.append(item.data), seen)
    assert seen == list(range(1, TIMES + 1))


def test_iterate_without_function_raises():
    queue = Queue()
    with pytest.raises(QueueError):
        queue.iterate(None, None)


def test_delete():
    queue = Queue()
    items = make_items(TIMES)
    for item in items:
        queue.append(item)
    queue.delete(items[10])
    assert 11 not in data_of(queue)
    queue.delete(items[TIMES - 1])
    queue.delete(items[0])
    expected = [n for n in range(1, TIMES + 1) if n not in (1, 11, TIMES)]
    assert data_of(queue) == expected
    assert data_of(reversed(queue)) == expected[::-1]
    assert len(queue) == TIMES - 3


def test_delete_first_occurrence():
    queue = Queue()
    items = make_items(TIMES // 10)
    for _ in range(1, TIMES // 10):
        for item in items:
            queue.append(item)
    for index in (0, 1, 2, 9):
        queue.delete(items[index])
    result = data_of(queue)
    assert result[:6] == [4, 5, 6, 7, 8, 9]
    assert result[6:] == list(range(1, 11)) * 8
    assert len(queue) == 86


def test_delete_only_item():
    queue = Queue()
    item = Item(1)
    queue.append(item)
    queue.delete(item)
    assert len(queue) == 0
    assert list(queue) == []


def test_delete_uses_identity():
    queue = Queue()
    queue.append(Item(5))
    with pytest.raises(QueueError):
        queue.delete(Item(5))


def test_delete_errors():
    queue = Queue()
    with pytest.raises(QueueError):
        queue.delete(Item(1))
    queue.append(Item(1))
    with pytest.raises(QueueError):
        queue.delete(None)


def test_prepend_append():
    queue = Queue()
    for item in make_items(TIMES):
        if item.data % 2 == 0:
            queue.append(item)
        else:
            queue.prepend(item)
    forward = data_of(queue)
    start = TIMES - 1 if TIMES % 2 == 0 else TIMES
    assert forward[: (TIMES + 1) // 2] == list(range(start, 0, -2))
    end = TIMES if TIMES % 2 == 0 else TIMES - 1
    backward = data_of(reversed(queue))
    assert backward[: TIMES // 2] == list(range(end, 0, -2))
    assert len(queue) == TIMES
    remaining = TIMES
    while len(queue):
        queue.dequeue()
        remaining -= 1
        assert len(queue) == remaining
    queue.free()
    assert len(queue) == 0


def test_none_items_rejected():
    queue = Queue()
    with pytest.raises(QueueError):
        queue.append(None)
    with pytest.raises(QueueError):
        queue.prepend(None)
    assert len(queue) == 0