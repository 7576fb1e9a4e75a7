import logging
import os
from urllib.parse import urljoin

import requests

from .config import settings
from .errors import DownloadError
from .fetcher import file_name, find_interest_nodes, load_url

logger = logging.getLogger("PayrollDownloader")

CHUNK_SIZE = 64 * 1024


def download(url, sink):
    """Stream the body of ``url`` into ``sink`` and return the bytes written."""
    written = 0
    try:
        with requests.get(url, stream=True) as response:
            response.raise_for_status()
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                sink.write(chunk)
                written += len(chunk)
    except requests.RequestException as e:
        raise DownloadError(f"error downloading {url}: {e}") from e
    return written


def save(base, url):
    path = f"{base}.pdf"
    try:
        with open(path, "wb") as f:
            size = download(url, f)
    except DownloadError:
        os.remove(path)
        raise
    logger.info(f"Report downloaded and saved to {path} ({size} bytes)")
    return path


class PayrollDownloader:
    def __init__(self, url=None, output_dir=None):
        self._url = url or settings.tjpb_url
        self._output_dir = output_dir if output_dir is not None else settings.output_dir

    def download_reports(self, month, year):
        doc = load_url(self._url)
        paths = []
        used = {}
        for link in find_interest_nodes(doc, month, year):
            url = urljoin(self._url, link.url)
            name = file_name(url, month, year)
            # year-only lists give every link the same name
            used[name] = used.get(name, 0) + 1
            if used[name] > 1:
                name = f"{name}-{used[name]}"
            base = os.path.join(self._output_dir, name)
            logger.info(f"Downloading {link.text or url}")
            paths.append(save(base, url))
        return paths
