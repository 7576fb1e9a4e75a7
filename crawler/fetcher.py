import logging
import re
from dataclasses import dataclass
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup

from .errors import FetchError, NotFoundError

logger = logging.getLogger("PayrollPageFetcher")

# ul ids look like "arquivos-2011" (older years) or "arquivos-2013-mes-01"
_CONTAINER_ID = re.compile(r"^arquivos-(?P<year>\d{4})(?:-mes-(?P<month>\d{1,2}))?$")
_CONTAINER_TAGS = ("ul", "ol")


@dataclass(frozen=True)
class LinkMatch:
    url: str
    text: str


def load_url(url):
    logger.info(f"Loading page {url}")
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"error loading {url}: {e}") from e
    try:
        return BeautifulSoup(response.text, "html.parser")
    except ParserRejectedMarkup as e:
        raise FetchError(f"error parsing {url}: {e}") from e


def walk(node):
    """Yield ``node`` and all of its descendants, depth-first.

    Text and comment nodes are leaves; only elements have children.
    """
    yield node
    if isinstance(node, Tag):
        for child in node.children:
            yield from walk(child)


def _container_matches(node, month, year):
    if not isinstance(node, Tag) or node.name not in _CONTAINER_TAGS:
        return False
    match = _CONTAINER_ID.match(node.get("id", ""))
    if not match or int(match.group("year")) != year:
        return False
    # a container without a month suffix covers the whole year
    return match.group("month") is None or int(match.group("month")) == month


def find_interest_nodes(root, month, year):
    """Return the links listed for ``month``/``year``, in document order.

    Raises:
        NotFoundError: if no matching container holds any anchor.
    """
    links = []
    for node in walk(root):
        if not isinstance(node, Tag) or node.name != "a":
            continue
        container = node.find_parent(lambda tag: _container_matches(tag, month, year))
        if container is not None:
            links.append(LinkMatch(url=node.get("href", ""), text=node.get_text(strip=True)))
    if not links:
        raise NotFoundError(f"couldn't find any link for {month:02d}-{year:04d}")
    logger.info(f"Found {len(links)} link(s) for {month:02d}-{year:04d}")
    return links


def file_name(url, month, year):
    last = urlparse(url).path.rsplit("/", 1)[-1].lower()
    if "magistrados" in last:
        category = "magistrados-"
    elif "servidores" in last:
        category = "servidores-"
    else:
        category = ""
    return f"remuneracoes-{category}tjpb-{month:02d}-{year:04d}"
