"""
crawler/__init__.py - Crawler Orchestrator

Coordinates the multi-threaded web crawler by:
- Creating the shared frontier and seeding it with the start URL
- Spawning worker threads
- Waiting for every worker and returning the final crawl state

Key role: High-level coordinator that ties together frontier and workers
"""

from utils import get_logger
from utils.download import download
from crawler.frontier import CrawlResult, Frontier, PageResult, Task
from crawler.worker import Worker


class Crawler(object):
    """
    Multi-threaded web crawler coordinator.

    Creates a shared frontier and spawns config.threads_count worker
    threads that crawl until no URL within config.max_depth is left.
    """

    def __init__(self, config, frontier_factory=Frontier, worker_factory=Worker,
                 fetcher=download):
        """
        Initialize the crawler.

        Args:
            config: Configuration object (threads_count, max_depth, ...)
            frontier_factory: Factory for creating frontier (for testing)
            worker_factory: Factory for creating workers (for testing)
            fetcher: Download function handed to every worker
        """
        if config.threads_count < 1:
            raise ValueError(f"threads_count must be >= 1, got {config.threads_count}")

        self.config = config
        self.logger = get_logger("CRAWLER")
        self.frontier = frontier_factory()
        self.workers = []
        self.worker_factory = worker_factory
        self.fetcher = fetcher

    def start_async(self, seed_url):
        """Seed the frontier and spawn worker threads without blocking."""
        self.frontier.seed(seed_url)
        self.workers = [
            self.worker_factory(worker_id, self.config, self.frontier, self.fetcher)
            for worker_id in range(1, self.config.threads_count + 1)
        ]
        self.logger.info(
            f"Crawling {seed_url} to depth {self.config.max_depth} "
            f"with {len(self.workers)} workers.")
        for worker in self.workers:
            worker.start()

    def start(self, seed_url):
        """Start crawler and block until all workers complete."""
        self.start_async(seed_url)
        return self.join()

    def join(self):
        """Wait for all worker threads to complete and return the final state."""
        for worker in self.workers:
            worker.join()
        return self.frontier.snapshot()

    def stop(self):
        """Ask workers to exit after the task each one currently holds."""
        self.frontier.halt()


__all__ = ["Crawler", "CrawlResult", "Frontier", "PageResult", "Task", "Worker"]
