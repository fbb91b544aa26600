"""
Base Adapter for source sites.
"""
from .logging import logger
from .web_scraping import fetch_html


class BaseAdapter:
    """A base class holding the fetch and selector helpers shared by site adapters."""

    name = "base"

    def __init__(self, session=None, timeout=None):
        if timeout is not None and not timeout > 0:
            raise ValueError(f"Timeout must be a positive number of seconds, got {timeout!r}")
        self.session = session
        self.timeout = timeout

    def get_encoding(self):
        """Returns the character encoding for the website."""
        return 'utf-8'

    def fetch(self, url):
        """Fetches `url` and returns its parsed document. FetchError propagates."""
        return fetch_html(url, session=self.session, timeout=self.timeout, encoding=self.get_encoding())

    @staticmethod
    def node_text(node):
        """Returns the node's text with whitespace runs collapsed, or '' for a missing node."""
        if node is None:
            return ''
        return ' '.join(node.get_text().split())

    def select_text(self, root, selector):
        """Text of the first node matching `selector`, or '' when nothing matches."""
        node = root.select_one(selector)
        if node is None:
            logger.trace(f"[{self.name.upper()}] No match for '{selector}'")
        return self.node_text(node)

    def select_attr(self, root, selector, attr):
        """Attribute of the first node matching `selector`, or '' when absent."""
        node = root.select_one(selector)
        if node is None:
            logger.trace(f"[{self.name.upper()}] No match for '{selector}'")
            return ''
        return self.node_attr(node, attr)

    @staticmethod
    def node_attr(node, attr):
        value = node.get(attr)
        if value is None:
            return ''
        # Multi-valued attributes such as class come back as lists
        if isinstance(value, list):
            return ' '.join(value)
        return value
