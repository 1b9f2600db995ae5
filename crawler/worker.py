"""
worker.py - Crawler Worker Threads

Worker threads that claim tasks from the frontier, download pages,
extract links using the scraper module, and queue discovered URLs
one level deeper.

Key role: Executes the crawl loop and the shutdown protocol
"""

from threading import Thread
import time

from utils.download import download
from utils import get_logger
import scraper


class Worker(Thread):
    """
    Worker thread that downloads and scrapes web pages.

    Runs until the frontier reports that nothing is queued and nothing
    is in flight. No lock is held while downloading or parsing.
    """

    def __init__(self, worker_id, config, frontier, fetcher=download):
        """
        Initialize a worker thread.

        Args:
            worker_id: Unique identifier for logging
            config: Configuration object (max_depth, time_delay, resolve_policy)
            frontier: Shared frontier instance
            fetcher: Callable (url, config, logger) -> Response
        """
        self.logger = get_logger(f"Worker-{worker_id}", "Worker")
        self.config = config
        self.frontier = frontier
        self.fetcher = fetcher

        super().__init__(name=f"Worker-{worker_id}", daemon=True)

    def run(self):
        """
        Main crawl loop.

        Process:
            1. Claim a task from the frontier
            2. If nothing is claimable, stop when the frontier is done,
               otherwise sleep briefly and retry
            3. Process the task (skipped past max depth)
            4. Release the task
        """
        while True:
            task = self.frontier.get_tbd_task()

            if task is None:
                if self.frontier.is_done():
                    self.logger.info("Frontier is empty. Stopping Crawler.")
                    break
                # Other workers may still queue links
                time.sleep(self.config.time_delay)
                continue

            try:
                if task.depth <= self.config.max_depth:
                    self.process(task)
            finally:
                self.frontier.mark_task_complete()

    def process(self, task):
        """Download one page, record the outcome and queue its links."""
        url, depth = task
        self.logger.info(f"[Depth {depth}] Crawling: {url}")

        recorded = False
        try:
            resp = self.fetcher(url, self.config, self.logger)
            self.frontier.record_result(depth, url, resp.ok)
            recorded = True

            if not resp.ok:
                self.logger.info(f"[Depth {depth}] Failed to process: {url}")
                return

            for link in scraper.scraper(url, resp, self.config.resolve_policy):
                self.frontier.add_task(link, depth + 1)
        except Exception:
            self.logger.exception(f"[Depth {depth}] Error while processing {url}")
            if not recorded:
                self.frontier.record_result(depth, url, False)
