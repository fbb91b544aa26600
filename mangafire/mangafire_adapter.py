"""Adapter for mangafire.to."""
from .base_adapter import BaseAdapter
from .chapter_numbers import parse_chapter_number
from .config import BASE_URL, CHAPTER_PATH_PREFIX, TITLE_PATH_PREFIX
from .logging import logger
from .models import CatalogEntry, CatalogPage, ChapterRecord, DeepLinkResult, PageRecord, TitleDetail
from .web_scraping import last_path_segment, make_absolute, strip_path_prefix

# Catalog
CATALOG_ITEM_SELECTOR = 'div.manga-item'
TITLE_ANCHOR_SELECTOR = 'a.manga-title'
COVER_IMAGE_SELECTOR = 'img.manga-cover'
NEXT_PAGE_SELECTOR = 'a.next-page'

# Title details
DETAIL_TITLE_SELECTOR = 'h1.title'
DETAIL_AUTHOR_SELECTOR = 'div.author'
DETAIL_ARTIST_SELECTOR = 'div.artist'
DETAIL_DESCRIPTION_SELECTOR = 'div.description'

# Chapters and pages
CHAPTER_ITEM_SELECTOR = 'div.chapter-item'
CHAPTER_ANCHOR_SELECTOR = 'a'
CHAPTER_NUMBER_SELECTOR = 'span.chapter-num'
PAGE_IMAGE_SELECTOR = 'img.page-img'


class MangaFireAdapter(BaseAdapter):
    """Adapter for scraping mangafire.to.

    Exposes the five operations a reader host calls: list_catalog, get_detail,
    list_chapters, list_pages and resolve_deep_link. Each call does at most one
    fetch and keeps nothing between calls.
    """

    name = "mangafire"
    base_url = BASE_URL

    # --- URL construction ---

    def catalog_url(self, page):
        return f"{self.base_url}/home?sort=popular&page={page}"

    def title_url(self, title_id):
        return f"{self.base_url}{TITLE_PATH_PREFIX}{title_id}"

    def chapters_url(self, title_id):
        return f"{self.base_url}{TITLE_PATH_PREFIX}{title_id}/chapters"

    def chapter_url(self, chapter_id):
        return f"{self.base_url}{CHAPTER_PATH_PREFIX}{chapter_id}"

    # --- Operations ---

    def list_catalog(self, page):
        """Returns one page of the popular catalog and whether another page follows."""
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise ValueError(f"Catalog page must be a positive integer, got {page!r}")

        logger.component(f"[MANGAFIRE] Listing catalog page {page}")
        soup = self.fetch(self.catalog_url(page))

        entries = []
        for item in soup.select(CATALOG_ITEM_SELECTOR):
            entry = self.parse_catalog_entry(item)
            if entry is None:
                continue
            entries.append(entry)

        has_more = len(soup.select(NEXT_PAGE_SELECTOR)) > 0
        logger.debug(f"[MANGAFIRE] Catalog page {page}: {len(entries)} entries, has_more={has_more}")
        return CatalogPage(entries=tuple(entries), has_more=has_more)

    def get_detail(self, title_id):
        """Returns the metadata of one title. Missing fields come back as empty strings."""
        url = self.title_url(title_id)
        logger.component(f"[MANGAFIRE] Fetching details for '{title_id}'")
        soup = self.fetch(url)

        return TitleDetail(
            id=title_id,
            page_url=url,
            title=self.select_text(soup, DETAIL_TITLE_SELECTOR),
            author=self.select_text(soup, DETAIL_AUTHOR_SELECTOR),
            artist=self.select_text(soup, DETAIL_ARTIST_SELECTOR),
            description=self.select_text(soup, DETAIL_DESCRIPTION_SELECTOR),
        )

    def list_chapters(self, title_id):
        """Returns the chapters of a title in the order the site lists them."""
        logger.component(f"[MANGAFIRE] Listing chapters for '{title_id}'")
        soup = self.fetch(self.chapters_url(title_id))

        chapters = []
        for item in soup.select(CHAPTER_ITEM_SELECTOR):
            chapter = self.parse_chapter_item(item)
            if chapter is None:
                continue
            chapters.append(chapter)

        logger.debug(f"[MANGAFIRE] Found {len(chapters)} chapters for '{title_id}'")
        return chapters

    def list_pages(self, chapter_id):
        """Returns the page images of a chapter, indexed by their position on the page."""
        logger.component(f"[MANGAFIRE] Listing pages for chapter '{chapter_id}'")
        soup = self.fetch(self.chapter_url(chapter_id))

        pages = [
            PageRecord(index=index, image_url=self.node_attr(img, 'src'))
            for index, img in enumerate(soup.select(PAGE_IMAGE_SELECTOR))
        ]
        logger.debug(f"[MANGAFIRE] Found {len(pages)} pages for chapter '{chapter_id}'")
        return pages

    def resolve_deep_link(self, url):
        """
        Maps a site URL to the title or chapter it points at.

        Title URLs are checked before chapter URLs. A chapter URL resolves to the
        first chapter of the list fetched for its last path segment; when that list
        is empty, or the URL matches neither pattern, an empty result is returned.
        """
        logger.component(f"[RESOLVE] Resolving deep link {url}")

        if TITLE_PATH_PREFIX in url:
            title_id = last_path_segment(url)
            logger.debug(f"[RESOLVE] Title link, id '{title_id}'")
            return DeepLinkResult(title=self.get_detail(title_id), chapter=None)

        if CHAPTER_PATH_PREFIX in url:
            chapter_id = last_path_segment(url)
            logger.debug(f"[RESOLVE] Chapter link, id '{chapter_id}'")
            chapters = self.list_chapters(chapter_id)
            if not chapters:
                logger.warning(f"[RESOLVE] No chapters found for '{chapter_id}', returning empty result")
                return DeepLinkResult(title=None, chapter=None)
            return DeepLinkResult(title=None, chapter=chapters[0])

        logger.debug(f"[RESOLVE] {url} is neither a title nor a chapter link")
        return DeepLinkResult(title=None, chapter=None)

    # --- Node extraction ---

    def parse_catalog_entry(self, item):
        """Builds a CatalogEntry from one catalog item node, or None when it has no title link."""
        anchor = item.select_one(TITLE_ANCHOR_SELECTOR)
        href = self.node_attr(anchor, 'href') if anchor is not None else ''
        if not href:
            logger.debug("[MANGAFIRE] Skipping catalog item without a title link")
            return None

        entry = CatalogEntry(
            id=strip_path_prefix(href, TITLE_PATH_PREFIX),
            title=self.node_text(anchor),
            cover_url=make_absolute(self.select_attr(item, COVER_IMAGE_SELECTOR, 'src')),
            page_url=make_absolute(href),
        )
        logger.trace(f"[MANGAFIRE] Catalog entry: {entry}")
        return entry

    def parse_chapter_item(self, item):
        """Builds a ChapterRecord from one chapter item node, or None when it has no link."""
        anchor = item.select_one(CHAPTER_ANCHOR_SELECTOR)
        href = self.node_attr(anchor, 'href') if anchor is not None else ''
        if not href:
            logger.debug("[MANGAFIRE] Skipping chapter item without a link")
            return None

        chapter = ChapterRecord(
            id=strip_path_prefix(href, CHAPTER_PATH_PREFIX),
            title=self.node_text(anchor),
            chapter_number=parse_chapter_number(self.select_text(item, CHAPTER_NUMBER_SELECTOR)),
            page_url=make_absolute(href),
        )
        logger.trace(f"[MANGAFIRE] Chapter: {chapter}")
        return chapter
