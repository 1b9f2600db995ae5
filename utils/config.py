import os

from utils.url import ResolvePolicy


class Config(object):
    """
    Crawler settings read from a ConfigParser.

    Every key has a fallback so a missing config file still yields a
    usable configuration. The CLI overrides max_depth and threads_count
    after construction.
    """

    def __init__(self, config):
        self.user_agent = config.get(
            "IDENTIFICATION", "USERAGENT", fallback="depth-crawler/1.0").strip()
        self.timeout = config.getfloat("CONNECTION", "TIMEOUT", fallback=10.0)
        if self.timeout <= 0:
            raise ValueError(f"TIMEOUT must be > 0, got {self.timeout}")

        threads = config.get("LOCAL PROPERTIES", "THREADCOUNT", fallback="").strip()
        self.threads_count = int(threads) if threads else 0
        if self.threads_count < 0:
            raise ValueError(f"THREADCOUNT must be >= 0, got {self.threads_count}")
        if self.threads_count == 0:
            self.threads_count = os.cpu_count() or 1

        self.max_depth = config.getint("CRAWLER", "MAXDEPTH", fallback=1)
        if self.max_depth < 0:
            raise ValueError(f"MAXDEPTH must be >= 0, got {self.max_depth}")
        self.time_delay = config.getfloat("CRAWLER", "BACKOFF", fallback=0.1)
        if self.time_delay < 0:
            raise ValueError(f"BACKOFF must be >= 0, got {self.time_delay}")
        self.resolve_policy = ResolvePolicy.from_name(
            config.get("CRAWLER", "RESOLVE", fallback="root_relative"))

        self.results_file = config.get("REPORT", "RESULTS", fallback="results.txt")
        self.visited_file = config.get("REPORT", "VISITED", fallback="all_visited.txt")
