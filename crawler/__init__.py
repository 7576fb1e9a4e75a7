from .downloader import PayrollDownloader, download, save
from .errors import CrawlerError, DownloadError, FetchError, NotFoundError
from .extractor import PayrollExtractor
from .fetcher import LinkMatch, file_name, find_interest_nodes, load_url, walk
