"""
MangaFire Source Adapter

Turns mangafire.to pages into catalog entries, title details, chapter lists
and page image lists for a reader application.

Modules:
    config: site constants, timeout and User-Agent settings
    logging: package logger with TRACE and COMPONENT levels
    models: immutable result records
    web_scraping: HTTP fetch and URL normalization
    mangafire_adapter: the five entry operations
    adapter_factory: URL to adapter lookup

Usage:
    from mangafire import MangaFireAdapter
    adapter = MangaFireAdapter()
    page = adapter.list_catalog(1)
"""

from .adapter_factory import get_adapter, validate_source_url
from .base_adapter import BaseAdapter
from .chapter_numbers import parse_chapter_number
from .config import BASE_URL
from .errors import FetchError, MangaFireError
from .logging import logger, set_debug_level
from .mangafire_adapter import MangaFireAdapter
from .models import (
    CatalogEntry,
    CatalogPage,
    ChapterRecord,
    DeepLinkResult,
    PageRecord,
    TitleDetail,
)
from .web_scraping import fetch_html, make_absolute

__all__ = [
    'BASE_URL',
    'BaseAdapter',
    'MangaFireAdapter',
    'get_adapter',
    'validate_source_url',
    'parse_chapter_number',
    'fetch_html',
    'make_absolute',
    'FetchError',
    'MangaFireError',
    'CatalogEntry',
    'CatalogPage',
    'ChapterRecord',
    'DeepLinkResult',
    'PageRecord',
    'TitleDetail',
    'logger',
    'set_debug_level',
]
