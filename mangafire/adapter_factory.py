"""
Factory for creating source adapters.
"""
from urllib.parse import urlsplit

from .config import SITE_DOMAIN
from .mangafire_adapter import MangaFireAdapter


def _host(url):
    if '://' not in url:
        url = f"//{url}"
    return (urlsplit(url).hostname or '').lower()


def get_adapter(url, session=None, timeout=None):
    """Return the appropriate source adapter for the given URL."""
    host = _host(url)
    if host == SITE_DOMAIN or host.endswith(f".{SITE_DOMAIN}"):
        return MangaFireAdapter(session=session, timeout=timeout)
    # Add more adapters here as they are created
    return None


def validate_source_url(url):
    adapter = get_adapter(url)
    if adapter:
        return {
            'valid': True,
            'site_type': adapter.__class__.__name__.replace("Adapter", ""),
            'warnings': []
        }
    else:
        return {
            'valid': False,
            'site_type': 'Unsupported',
            'warnings': ["This website is not supported."]
        }
