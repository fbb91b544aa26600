"""Exceptions raised by the MangaFire adapter."""


class MangaFireError(Exception):
    """Base class for all adapter errors."""


class FetchError(MangaFireError):
    """A page could not be fetched: network failure, timeout, bad status or non-HTML body."""

    def __init__(self, url, reason, status_code=None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")
