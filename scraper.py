from bs4 import BeautifulSoup

from utils.url import ResolvePolicy, resolve


SKIPPED_PREFIXES = ("javascript:", "mailto:", "tel:", "#")


def scraper(url, resp, policy=ResolvePolicy.ROOT_RELATIVE):
    """Return the absolute URLs linked from a downloaded page, in page order."""
    links = []
    for link in extract_links(resp.content):
        absolute = resolve(url, link, policy)
        if absolute:
            links.append(absolute)
    return links


def extract_links(content):
    """
    Collect the href of every <a> tag in an HTML document.

    Empty, javascript:, mailto:, tel: and in-page fragment links are
    skipped. Duplicates are removed keeping the first occurrence, so the
    result follows document order.
    """
    if not content:
        return []

    soup = BeautifulSoup(content, "lxml")
    links = []
    for tag in soup.find_all("a", href=True):
        href = tag["href"].strip()
        if not href or href.lower().startswith(SKIPPED_PREFIXES):
            continue
        links.append(href)

    return list(dict.fromkeys(links))
