"""
Pytest configuration and fixtures for crawler tests.
"""

import threading
from configparser import ConfigParser

import pytest
from hypothesis import HealthCheck, settings, Verbosity

from utils.config import Config
from utils.response import Response


settings.register_profile(
    "fast", max_examples=25, deadline=None, verbosity=Verbosity.quiet,
    suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile("fast")


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Keep Logs/ and report files out of the source tree."""
    monkeypatch.chdir(tmp_path)


def make_config(**overrides):
    cparser = ConfigParser()
    cparser.read_dict({
        "LOCAL PROPERTIES": {"THREADCOUNT": "4"},
        "CRAWLER": {"MAXDEPTH": "1", "BACKOFF": "0.001"},
    })
    config = Config(cparser)
    for key, value in overrides.items():
        setattr(config, key, value)
    return config


def page(*links):
    """HTML page body linking to each of links."""
    anchors = "".join(f'<a href="{link}">{link}</a>' for link in links)
    return f"<html><body>{anchors}</body></html>"


class FakeWeb(object):
    """
    In-memory site used in place of utils.download.download.

    pages maps URL -> HTML body. URLs listed in failing, or missing from
    pages, come back as 404. Every request is counted.
    """

    def __init__(self, pages, failing=()):
        self.pages = dict(pages)
        self.failing = set(failing)
        self.requests = []
        self._lock = threading.Lock()

    def __call__(self, url, config, logger=None):
        with self._lock:
            self.requests.append(url)
        if url in self.failing or url not in self.pages:
            return Response(url, status=404, error="Not Found")
        return Response(url, status=200, content=self.pages[url])

    def fetch_count(self, url):
        with self._lock:
            return self.requests.count(url)
