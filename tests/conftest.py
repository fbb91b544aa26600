"""
Pytest configuration and fixtures for the MangaFire adapter tests.
"""

import pytest
import requests

from mangafire import MangaFireAdapter

BASE = "https://mangafire.to"

CATALOG_HTML = """
<html><body>
  <div class="manga-list">
    <div class="manga-item">
      <img class="manga-cover" src="/covers/one-piece.jpg">
      <a class="manga-title" href="/manga/one-piece">One Piece</a>
    </div>
    <div class="manga-item">
      <img class="manga-cover" src="https://static.mangafire.to/covers/naruto.jpg">
      <a class="manga-title" href="/manga/naruto">  Naruto
      </a>
    </div>
  </div>
  <nav><a class="next-page" href="/home?sort=popular&page=2">Next</a></nav>
</body></html>
"""

LAST_CATALOG_HTML = """
<html><body>
  <div class="manga-item">
    <a class="manga-title" href="/manga/bleach">Bleach</a>
  </div>
  <div class="manga-item">
    <img class="manga-cover" src="/covers/orphan.jpg">
  </div>
</body></html>
"""

EMPTY_HTML = "<html><body><p>Nothing here</p></body></html>"

DETAIL_HTML = """
<html><body>
  <h1 class="title">One Piece</h1>
  <div class="author">Eiichiro Oda</div>
  <div class="artist">Eiichiro  Oda</div>
  <div class="description">
    <p>Gol D. Roger was known as the Pirate King.</p>
    <p>His last words sent the world to sea.</p>
  </div>
</body></html>
"""

CHAPTERS_HTML = """
<html><body>
  <div class="chapter-item">
    <a href="/chapter/one-piece-ch-1">Romance Dawn</a><span class="chapter-num">1</span>
  </div>
  <div class="chapter-item">
    <a href="/chapter/one-piece-ch-12-5">Side Story</a><span class="chapter-num">12.5</span>
  </div>
  <div class="chapter-item">
    <a href="/chapter/one-piece-oneshot">Special</a><span class="chapter-num">Oneshot</span>
  </div>
  <div class="chapter-item">
    <a href="/chapter/one-piece-ch-3">No Label</a>
  </div>
</body></html>
"""

SINGLE_CHAPTER_HTML = """
<html><body>
  <div class="chapter-item">
    <a href="/chapter/one-piece-ch-5">Chapter 5</a><span class="chapter-num">5</span>
  </div>
</body></html>
"""

PAGES_HTML = """
<html><body>
  <div class="reader">
    <img class="page-img" data-index="3" src="https://cdn.mangafire.to/p/001.jpg">
    <img class="page-img" data-index="1" src="http://cdn.mangafire.to/p/002.jpg">
    <img class="ad-banner" src="/ads/banner.png">
    <img class="page-img" data-index="2" src="//cdn.mangafire.to/p/003.jpg">
  </div>
</body></html>
"""


def make_response(url, body, status_code=200, content_type='text/html; charset=utf-8'):
    """Build a real requests.Response carrying `body`."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode('utf-8')
    response.url = url
    if content_type:
        response.headers['Content-Type'] = content_type
    response.encoding = 'utf-8'
    return response


class FakeSession:
    """Stands in for requests.Session, serving canned pages by URL.

    A route value may be an HTML string, a prepared Response, or an exception
    instance to raise. Unknown URLs answer 404.
    """

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({'url': url, 'headers': headers, 'timeout': timeout})
        route = self.routes.get(url)
        if route is None:
            return make_response(url, "<html><body>Not Found</body></html>", status_code=404)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, requests.Response):
            return route
        return make_response(url, route)

    @property
    def requested_urls(self):
        return [call['url'] for call in self.calls]


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def adapter(fake_session):
    return MangaFireAdapter(session=fake_session, timeout=5)


@pytest.fixture
def html_pages():
    return {
        'catalog': CATALOG_HTML,
        'last_catalog': LAST_CATALOG_HTML,
        'empty': EMPTY_HTML,
        'detail': DETAIL_HTML,
        'chapters': CHAPTERS_HTML,
        'single_chapter': SINGLE_CHAPTER_HTML,
        'pages': PAGES_HTML,
    }


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Tests that drive several adapter operations together")
