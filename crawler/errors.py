class CrawlerError(Exception):
    pass


class FetchError(CrawlerError):
    """Page could not be retrieved or parsed."""


class NotFoundError(CrawlerError):
    """No payroll link for the requested month/year."""


class DownloadError(CrawlerError):
    """Payroll file could not be downloaded."""
