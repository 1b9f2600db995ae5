"""
utils/url.py - URL Parsing and Link Resolution

Small URL value type plus the resolver that turns raw hrefs into
absolute URLs. Which href forms are resolvable is an explicit policy:

- ABSOLUTE_ONLY: only links that already carry an http(s) scheme
- ROOT_RELATIVE: absolute links and links rooted at the domain ("/path")
- FULL: any relative reference, resolved with urljoin

Resolved URLs are not normalized; an absolute link comes back exactly
as it was written.
"""

from collections import namedtuple
from enum import Enum
from urllib.parse import urljoin, urlsplit


SCHEMES = {"http", "https"}


class Url(namedtuple("Url", ["scheme", "host", "path"])):
    """Absolute http(s) URL; path holds everything after the host verbatim."""

    __slots__ = ()

    @property
    def origin(self):
        return f"{self.scheme}://{self.host}"

    def __str__(self):
        return self.origin + self.path


def parse_url(text):
    """Parse an absolute http(s) URL, returning None for anything else."""
    if not text:
        return None
    try:
        parsed = urlsplit(text)
    except ValueError:
        return None
    if parsed.scheme not in SCHEMES or not parsed.netloc:
        return None

    prefix = f"{parsed.scheme}://{parsed.netloc}"
    if text[:len(prefix)].lower() != prefix.lower():
        # e.g. "http:/host" or "http:\\host", which urlsplit tolerates
        return None
    return Url(parsed.scheme, parsed.netloc, text[len(prefix):])


class ResolvePolicy(Enum):
    ABSOLUTE_ONLY = "absolute_only"
    ROOT_RELATIVE = "root_relative"
    FULL = "full"

    @classmethod
    def from_name(cls, name):
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown resolve policy {name!r} (expected one of: {choices})") from None


def resolve(base_url, link, policy=ResolvePolicy.ROOT_RELATIVE):
    """
    Resolve link against base_url.

    Returns:
        Absolute URL string, or None when the policy declines the link
        or the base URL itself is not an absolute http(s) URL
    """
    if parse_url(link):
        return link
    if policy is ResolvePolicy.ABSOLUTE_ONLY:
        return None

    base = parse_url(base_url)
    if base is None:
        return None

    if policy is ResolvePolicy.ROOT_RELATIVE:
        # "//host/path" is a network-path reference, not a root-relative one
        if link.startswith("/") and not link.startswith("//"):
            return base.origin + link
        return None

    joined = parse_url(urljoin(base_url, link))
    return str(joined) if joined else None
