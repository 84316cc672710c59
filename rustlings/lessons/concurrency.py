"""Threads: timing workers, updating shared state and sending values over a channel."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from queue import SimpleQueue

_CLOSED = object()


def timed_workers(count: int = 10, delay: float = 0.25) -> list[int]:
    """Run count threads that each sleep for delay; return each one's time in milliseconds."""
    if count < 0:
        raise ValueError("count must not be negative")
    if count == 0:
        return []

    def work() -> int:
        start = time.monotonic()
        time.sleep(delay)
        return int((time.monotonic() - start) * 1000)

    with ThreadPoolExecutor(max_workers=count) as pool:
        futures = [pool.submit(work) for _ in range(count)]
        return [future.result() for future in futures]


@dataclass
class JobStatus:
    """A counter of finished jobs shared between threads."""

    jobs_completed: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def complete(self) -> None:
        """Record one finished job."""
        with self._lock:
            self.jobs_completed += 1


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run count jobs in their own threads, each marking itself done; wait for all of them."""
    if count < 0:
        raise ValueError("count must not be negative")
    status = JobStatus()

    def job() -> None:
        time.sleep(delay)
        status.complete()

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return status


@dataclass
class Queue:
    """Values to send, split into two halves."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, channel: SimpleQueue, delay: float = 1.0) -> list[threading.Thread]:
    """Send each half of the queue from its own thread; each sender closes its end when done."""

    def sender(values: list[int]) -> None:
        for value in values:
            channel.put(value)
            time.sleep(delay)
        channel.put(_CLOSED)

    threads = [
        threading.Thread(target=sender, args=(half,), daemon=True)
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue | None = None, delay: float = 1.0) -> list[int]:
    """Send the queue's values from two threads and return every value received."""
    queue = queue if queue is not None else Queue()
    channel: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, channel, delay)
    open_senders = len(senders)
    received: list[int] = []
    while open_senders:
        item = channel.get()
        if item is _CLOSED:
            open_senders -= 1
        else:
            received.append(item)
    for sender in senders:
        sender.join()
    return received