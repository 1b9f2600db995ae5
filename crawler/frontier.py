"""
frontier.py - Shared Crawl State

Holds everything the worker threads share:
- FIFO queue of pending (url, depth) tasks
- Visited set, filled when a worker claims a URL (not when it is queued)
- Results ledger: depth -> [(url, success)] in recording order
- Count of claimed tasks that are still being processed

Key role: every read and write goes through one lock, so dedup and
termination detection are race-free across workers
"""

from collections import defaultdict, deque, namedtuple
from threading import RLock

from utils import get_logger


Task = namedtuple("Task", ["url", "depth"])
PageResult = namedtuple("PageResult", ["url", "success"])


class CrawlResult(object):
    """
    Read-only view of a finished crawl.

    Attributes:
        visited: frozenset of every claimed URL
        results: dict depth -> tuple of PageResult, depths ascending
    """

    def __init__(self, visited, results):
        self.visited = frozenset(visited)
        self.results = {
            depth: tuple(results[depth]) for depth in sorted(results)}
        self._processed = frozenset(
            record.url for records in self.results.values() for record in records)

    def processed_urls(self):
        return set(self._processed)

    def is_processed(self, url):
        return url in self._processed

    def counts(self):
        """Return {depth: (successes, failures)}."""
        counts = {}
        for depth, records in self.results.items():
            successes = sum(1 for record in records if record.success)
            counts[depth] = (successes, len(records) - successes)
        return counts


class Frontier(object):
    """
    Thread-safe work queue with claim-time deduplication.

    Duplicate tasks may sit in the queue; a URL is only processed by the
    first worker that claims it. The in-flight counter is incremented in
    the same critical section as the claim and decremented only after the
    worker has queued every child of that task, so "queue empty and
    nothing in flight" means the crawl is over.
    """

    def __init__(self):
        self.logger = get_logger("FRONTIER")

        self.lock = RLock()  # Protects all frontier data structures

        self.to_visit = deque()
        self.visited = set()
        self.results_by_depth = defaultdict(list)
        self.active_tasks = 0
        self._halted = False

    def seed(self, url):
        """Queue the start URL at depth 0. Call before any worker starts."""
        self.add_task(url, 0)

    def add_task(self, url, depth):
        """Queue a task (thread-safe). Dedup happens at claim time."""
        with self.lock:
            self.to_visit.append(Task(url, depth))

    def get_tbd_task(self):
        """
        Claim the next unvisited task (thread-safe).

        Already-visited entries at the head of the queue are discarded
        within the same critical section.

        Returns:
            Task, or None if the queue holds no unvisited URL or the
            frontier has been halted
        """
        with self.lock:
            if self._halted:
                return None
            while self.to_visit:
                task = self.to_visit.popleft()
                if task.url in self.visited:
                    continue
                self.visited.add(task.url)
                self.active_tasks += 1
                return task
            return None

    def record_result(self, depth, url, success):
        with self.lock:
            self.results_by_depth[depth].append(PageResult(url, success))

    def mark_task_complete(self):
        """Release a claimed task once all of its children are queued."""
        with self.lock:
            if self.active_tasks <= 0:
                self.logger.error("Completed a task, but none is in flight.")
                return
            self.active_tasks -= 1

    def is_done(self):
        """
        Check whether workers may shut down (thread-safe).

        Returns:
            True if the queue is empty and no task is in flight, or the
            frontier has been halted

        Note:
            In-flight tasks may still queue new URLs, so an empty queue
            alone does not end the crawl.
        """
        with self.lock:
            if self._halted:
                return True
            return not self.to_visit and self.active_tasks == 0

    def halt(self):
        """Stop handing out tasks; workers exit after their current one."""
        with self.lock:
            if not self._halted:
                self.logger.info(
                    f"Halting with {len(self.to_visit)} queued and "
                    f"{self.active_tasks} in-flight tasks.")
            self._halted = True

    @property
    def halted(self):
        with self.lock:
            return self._halted

    def snapshot(self):
        with self.lock:
            return CrawlResult(self.visited, self.results_by_depth)
