"""
Command-line front end for the MangaFire adapter.

Examples:
    mangafire catalog 1
    mangafire chapters one-piece
    mangafire resolve https://mangafire.to/manga/one-piece
"""
import argparse
import json
import sys

from .adapter_factory import validate_source_url
from .errors import FetchError
from .logging import DEBUG_LEVELS, logger, set_debug_level
from .mangafire_adapter import MangaFireAdapter


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError("page numbers start at 1")
    return number


def positive_float(value):
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number")
    if not number > 0:
        raise argparse.ArgumentTypeError("timeout must be greater than 0")
    return number


def build_parser():
    parser = argparse.ArgumentParser(prog='mangafire', description='Read catalog, title, chapter and page data from mangafire.to.')
    parser.add_argument('--debug-level', type=str.upper, choices=list(DEBUG_LEVELS), default=None,
                        help='Logger verbosity (defaults to MANGAFIRE_DEBUG_LEVEL or INFO).')
    parser.add_argument('--timeout', type=positive_float, default=None, help='HTTP timeout in seconds.')
    subparsers = parser.add_subparsers(dest='command', required=True)

    catalog = subparsers.add_parser('catalog', help='List one page of the popular catalog.')
    catalog.add_argument('page', type=positive_int, nargs='?', default=1, help='1-based page number.')

    detail = subparsers.add_parser('detail', help='Show the metadata of a title.')
    detail.add_argument('title_id', help='Title identifier, e.g. one-piece.')

    chapters = subparsers.add_parser('chapters', help='List the chapters of a title.')
    chapters.add_argument('title_id', help='Title identifier, e.g. one-piece.')

    pages = subparsers.add_parser('pages', help='List the page images of a chapter.')
    pages.add_argument('chapter_id', help='Chapter identifier.')

    resolve = subparsers.add_parser('resolve', help='Resolve a mangafire.to URL to a title or chapter.')
    resolve.add_argument('url', help='Full URL of a title or chapter page.')

    return parser


def run_command(adapter, args):
    """Runs the parsed command and returns a JSON-serializable result."""
    if args.command == 'catalog':
        return adapter.list_catalog(args.page).to_dict()
    if args.command == 'detail':
        return adapter.get_detail(args.title_id).to_dict()
    if args.command == 'chapters':
        return [chapter.to_dict() for chapter in adapter.list_chapters(args.title_id)]
    if args.command == 'pages':
        return [page.to_dict() for page in adapter.list_pages(args.chapter_id)]
    if args.command == 'resolve':
        validation = validate_source_url(args.url)
        for warning in validation['warnings']:
            logger.warning(f"[CLI] {args.url}: {warning}")
        return adapter.resolve_deep_link(args.url).to_dict()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.debug_level:
        set_debug_level(args.debug_level)

    adapter = MangaFireAdapter(timeout=args.timeout)
    try:
        result = run_command(adapter, args)
    except FetchError as e:
        logger.error(f"[CLI] {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
