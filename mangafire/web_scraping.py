"""
HTTP fetching and URL normalization shared by all adapter operations.
"""
from urllib.parse import urljoin, urlsplit

import requests
from bs4 import BeautifulSoup

from .config import BASE_URL, get_request_headers, load_request_timeout
from .errors import FetchError
from .logging import logger

HTML_CONTENT_TYPES = ('text/html', 'application/xhtml+xml', 'text/xml', 'application/xml')


def fetch_html(url, session=None, timeout=None, encoding='utf-8'):
    """
    Issues a single GET for `url` and parses the body into a BeautifulSoup tree.

    There is no retry: any failure is reported once as a FetchError.

    Args:
        url (str): Absolute URL to fetch.
        session (requests.Session, optional): Session to send the request with.
            Falls back to a plain `requests.get`.
        timeout (float, optional): Seconds before giving up. Defaults to the configured timeout.
        encoding (str): Encoding used to decode the body.

    Returns:
        BeautifulSoup: The parsed document.

    Raises:
        FetchError: On network failure, timeout, non-success status or a non-HTML body.
    """
    http = session if session is not None else requests
    if timeout is None:
        timeout = load_request_timeout()

    logger.debug(f"[FETCH] GET {url}")
    try:
        response = http.get(url, headers=get_request_headers(), timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        status_code = getattr(getattr(e, 'response', None), 'status_code', None)
        logger.error(f"[FETCH ERROR] Request for {url} failed: {e}")
        raise FetchError(url, str(e), status_code=status_code) from e

    content_type = response.headers.get('Content-Type', '')
    if content_type and content_type.split(';')[0].strip().lower() not in HTML_CONTENT_TYPES:
        logger.error(f"[FETCH ERROR] {url} returned non-HTML content: {content_type}")
        raise FetchError(url, f"unexpected content type '{content_type}'", status_code=response.status_code)

    response.encoding = encoding
    return BeautifulSoup(response.text, 'html.parser')


def make_absolute(href, base_url=BASE_URL):
    """Joins a site-relative path onto the site origin. Empty input stays empty."""
    if not href:
        return ''
    return urljoin(base_url, href)


def strip_path_prefix(href, prefix):
    """
    Turns an href into an identifier by removing a path marker such as "/manga/".

    "/manga/one-piece" and "https://mangafire.to/manga/one-piece" both give "one-piece".
    """
    if not href:
        return ''
    path = urlsplit(href).path if '://' in href else href
    while prefix in path:
        path = path.replace(prefix, '')
    return path


def last_path_segment(url):
    """Returns the final path segment of a URL, ignoring query, fragment and trailing slashes."""
    path = urlsplit(url).path.rstrip('/')
    return path.rsplit('/', 1)[-1]
