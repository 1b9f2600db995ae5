import threading

import pytest

from conftest import FakeWeb, make_config, page
from crawler import Crawler
from crawler.frontier import PageResult
from utils.response import Response


def crawl(web, seed="http://a.test/A", **overrides):
    crawler = Crawler(make_config(**overrides), fetcher=web)
    return crawler.start(seed)


def test_failed_child_is_recorded_at_its_depth():
    web = FakeWeb({
        "http://a.test/A": page("/B", "/C"),
        "http://a.test/B": page(),
        "http://a.test/C": page(),
    }, failing={"http://a.test/B"})

    result = crawl(web, max_depth=1)

    assert result.visited == {"http://a.test/A", "http://a.test/B", "http://a.test/C"}
    assert result.results[0] == (PageResult("http://a.test/A", True),)
    assert set(result.results[1]) == {
        PageResult("http://a.test/B", False), PageResult("http://a.test/C", True)}


def test_depth_zero_claims_child_without_processing_it():
    web = FakeWeb({
        "http://a.test/A": page("/B"),
        "http://a.test/B": page(),
    })

    result = crawl(web, max_depth=0)

    assert result.visited == {"http://a.test/A", "http://a.test/B"}
    assert result.results == {0: (PageResult("http://a.test/A", True),)}
    assert not result.is_processed("http://a.test/B")
    assert web.fetch_count("http://a.test/B") == 0


def test_cycle_terminates_and_visits_each_url_once():
    web = FakeWeb({
        "http://a.test/A": page("/B"),
        "http://a.test/B": page("/A"),
    })

    result = crawl(web, max_depth=5)

    assert result.visited == {"http://a.test/A", "http://a.test/B"}
    assert result.counts() == {0: (1, 0), 1: (1, 0)}
    assert web.fetch_count("http://a.test/A") == 1
    assert web.fetch_count("http://a.test/B") == 1


def test_failed_seed_ends_crawl():
    result = crawl(FakeWeb({}), max_depth=3)
    assert result.visited == {"http://a.test/A"}
    assert result.counts() == {0: (0, 1)}


def test_url_discovered_twice_is_fetched_once():
    web = FakeWeb({
        "http://a.test/A": page("/B", "/C"),
        "http://a.test/B": page("/D"),
        "http://a.test/C": page("/D"),
        "http://a.test/D": page(),
    })

    result = crawl(web, max_depth=2, threads_count=8)

    assert web.fetch_count("http://a.test/D") == 1
    assert result.counts() == {0: (1, 0), 1: (2, 0), 2: (1, 0)}


def test_shallow_rediscovery_keeps_first_claim_depth():
    # B is linked from A (depth 1) and from C (depth 2); a single worker
    # claims the depth 1 task first
    web = FakeWeb({
        "http://a.test/A": page("/B", "/C"),
        "http://a.test/B": page(),
        "http://a.test/C": page("/B"),
    })

    result = crawl(web, max_depth=2, threads_count=1)

    assert PageResult("http://a.test/B", True) in result.results[1]
    assert 2 not in result.results


def test_workers_wait_for_slow_page_before_exiting():
    release = threading.Event()
    web = FakeWeb({
        "http://a.test/A": page("/B"),
        "http://a.test/B": page(),
    })

    def slow_fetcher(url, config, logger=None):
        if url == "http://a.test/A":
            release.wait(5)
        return web(url, config, logger)

    crawler = Crawler(make_config(max_depth=1, threads_count=4), fetcher=slow_fetcher)
    crawler.start_async("http://a.test/A")
    # idle workers see an empty queue while A is still in flight
    release.set()
    result = crawler.join()

    assert result.visited == {"http://a.test/A", "http://a.test/B"}


def test_stop_halts_crawl_after_current_pages():
    started = threading.Event()
    release = threading.Event()

    def fetcher(url, config, logger=None):
        started.set()
        release.wait(5)
        return Response(url, status=200, content=page("/next-" + url[-1]))

    crawler = Crawler(make_config(max_depth=10, threads_count=2), fetcher=fetcher)
    crawler.start_async("http://a.test/A")
    assert started.wait(5)
    crawler.stop()
    release.set()
    result = crawler.join()

    assert result.results == {0: (PageResult("http://a.test/A", True),)}


def test_rejects_zero_threads():
    with pytest.raises(ValueError):
        Crawler(make_config(threads_count=0))


def test_factories_are_used():
    created = []

    class RecordingWorker(object):
        def __init__(self, worker_id, config, frontier, fetcher):
            created.append(worker_id)
            self.frontier = frontier

        def start(self):
            pass

        def join(self):
            pass

    crawler = Crawler(make_config(threads_count=3), worker_factory=RecordingWorker)
    result = crawler.start("http://a.test/A")

    assert created == [1, 2, 3]
    assert result.visited == frozenset()
