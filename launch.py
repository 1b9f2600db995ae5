"""
launch.py - Web Crawler Entry Point

Main entry point for the web crawler application.
Handles argument parsing, configuration loading, running the crawl
and writing the reports.

Usage:
    python launch.py <start_url> <depth>
    python launch.py <start_url> <depth> --threads 8
    python launch.py <start_url> <depth> --config_file path
"""

import signal
import threading
from configparser import ConfigParser
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config
from utils.download import download
from utils.url import parse_url
from crawler import Crawler
from report import save_report


def load_config(config_file, depth, threads=None):
    """Read config_file and apply the command line overrides."""
    cparser = ConfigParser()
    cparser.read(config_file)
    config = Config(cparser)
    config.max_depth = depth
    if threads is not None:
        config.threads_count = threads
    return config


def main(start_url, config, fetcher=download):
    """
    Crawl from start_url down to config.max_depth and write the reports.

    Args:
        start_url: Absolute http(s) URL to start from
        config: Configuration object
        fetcher: Download function (for testing)

    Returns:
        Process exit code, 1 if a report could not be written
    """
    logger = get_logger("LAUNCH")
    logger.info(f"Using {config.threads_count} threads for crawling.")
    crawler = Crawler(config, fetcher=fetcher)

    def _handle_sigterm(signum, frame):
        """Let in-flight pages finish, then report what was crawled."""
        crawler.stop()

    # signal handlers can only be installed from the main thread
    on_main_thread = threading.current_thread() is threading.main_thread()
    if on_main_thread:
        previous = signal.signal(signal.SIGTERM, _handle_sigterm)
    try:
        crawler.start_async(start_url)
        try:
            result = crawler.join()
        except KeyboardInterrupt:
            logger.info("Interrupted, waiting for in-flight pages.")
            crawler.stop()
            result = crawler.join()
    finally:
        if on_main_thread:
            signal.signal(signal.SIGTERM, previous)

    logger.info(f"Crawling finished. Visited {len(result.visited)} unique pages.")
    if not save_report(result, config.results_file, config.visited_file):
        return 1
    return 0


def build_parser():
    parser = ArgumentParser(description="Crawl a site to a fixed link depth.")
    parser.add_argument("start_url", type=str,
                        help="Absolute http(s) URL to start from")
    parser.add_argument("depth", type=int,
                        help="Maximum link depth (the start URL is depth 0)")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--threads", type=int, default=None,
                        help="Number of worker threads (default: THREADCOUNT or CPU count)")
    return parser


def run(argv=None, fetcher=download):
    """Parse argv, validate it and run the crawl. Usage errors exit with 2."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.depth < 0:
        parser.error(f"depth must be >= 0, got {args.depth}")
    if args.threads is not None and args.threads < 1:
        parser.error(f"--threads must be >= 1, got {args.threads}")
    if parse_url(args.start_url) is None:
        parser.error(f"start_url must be an absolute http(s) URL, got {args.start_url!r}")

    try:
        config = load_config(args.config_file, args.depth, args.threads)
    except ValueError as e:
        parser.error(f"invalid configuration in {args.config_file}: {e}")

    return main(args.start_url, config, fetcher)


if __name__ == "__main__":
    raise SystemExit(run())
