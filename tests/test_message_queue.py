import pytest

from udprouter.message_queue import (
    SIZE_QUEUE,
    MessageQueue,
    QueueEmptyError,
    QueueFullError,
)
from udprouter.messages import Message


def test_new_queue_is_empty():
    q = MessageQueue()
    assert q.is_empty()
    assert not q.is_full()
    assert len(q) == 0


def test_fifo_order():
    q = MessageQueue()
    for text in ("a", "b", "c"):
        q.enqueue(Message(data=text))
    assert [q.dequeue().data for _ in range(3)] == ["a", "b", "c"]
    assert q.is_empty()


def test_holds_one_less_than_slots():
    q = MessageQueue()
    for i in range(SIZE_QUEUE - 1):
        q.enqueue(i)
    assert q.is_full()
    assert len(q) == SIZE_QUEUE - 1
    with pytest.raises(QueueFullError):
        q.enqueue(99)


def test_dequeue_empty_raises():
    with pytest.raises(QueueEmptyError):
        MessageQueue().dequeue()


def test_wraps_around():
    q = MessageQueue()
    seen = []
    for i in range(40):
        q.enqueue(i)
        if len(q) > 5:
            seen.append(q.dequeue())
    while not q.is_empty():
        seen.append(q.dequeue())
    assert seen == list(range(40))