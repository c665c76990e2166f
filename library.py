#!/usr/bin/env python3
"""Book Library CLI - search Open Library and show book details."""
import argparse
import asyncio
import sys
import logging

from booklibrary.client import OpenLibraryClient
from booklibrary.async_client import AsyncOpenLibraryClient
from booklibrary.search import QueryExecutor, AsyncQueryExecutor
from booklibrary.details import DetailResolver, AsyncDetailResolver
from booklibrary.session import SearchSession
from booklibrary.models import SearchQuery, SearchMode, Loading, Error, DetailFound
from booklibrary.render import render_outcome, render_detail, FORMATS
from booklibrary.config import Config

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_query(args) -> SearchQuery:
    mode = SearchMode.AUTHOR if args.author else SearchMode.TITLE
    return SearchQuery(args.query, mode)


def search_books_sync(args, config: Config) -> int:
    """Search using the blocking client."""
    with OpenLibraryClient(timeout=config.DEFAULT_TIMEOUT) as client:
        executor = QueryExecutor(client)
        print(render_outcome(Loading(), args.format), file=sys.stderr)
        outcome = executor.execute(build_query(args))

    print(render_outcome(outcome, args.format))
    return 1 if isinstance(outcome, Error) else 0


async def search_books_async(args, config: Config) -> int:
    """Search through a SearchSession using the async client."""
    async with AsyncOpenLibraryClient(timeout=config.DEFAULT_TIMEOUT) as client:
        session = SearchSession(AsyncQueryExecutor(client))

        def show_progress(outcome):
            if isinstance(outcome, Loading):
                print(render_outcome(outcome, args.format), file=sys.stderr)

        session.subscribe(show_progress)
        await session.search(build_query(args))

    print(render_outcome(session.outcome, args.format))
    return 1 if isinstance(session.outcome, Error) else 0


def show_details_sync(args, config: Config) -> int:
    with OpenLibraryClient(timeout=config.DEFAULT_TIMEOUT) as client:
        outcome = DetailResolver(client).lookup(args.isbn)

    print(render_detail(outcome, args.format))
    return 0 if isinstance(outcome, DetailFound) else 1


async def show_details_async(args, config: Config) -> int:
    async with AsyncOpenLibraryClient(timeout=config.DEFAULT_TIMEOUT) as client:
        outcome = await AsyncDetailResolver(client).lookup(args.isbn)

    print(render_detail(outcome, args.format))
    return 0 if isinstance(outcome, DetailFound) else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Book Library - search Open Library by title or author",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search by title
  %(prog)s search "the lord of the rings"
  
  # Search by author, compact output
  %(prog)s search "ursula le guin" --author --format compact
  
  # Show details for an ISBN
  %(prog)s details 0451526538
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests")
    
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")
    
    # Search command
    search_parser = subparsers.add_parser("search", help="Search for books")
    search_parser.add_argument("query", help="Search text")
    search_parser.add_argument("--author", action="store_true", help="Search by author instead of title")
    search_parser.add_argument("--format", choices=FORMATS, default="table", help="Output format")
    search_parser.add_argument("--async", dest="use_async", action="store_true", help="Use async client")
    
    # Details command
    details_parser = subparsers.add_parser("details", help="Show details for an ISBN")
    details_parser.add_argument("isbn", help="Book ISBN")
    details_parser.add_argument("--format", choices=["table", "json"], default="table", help="Output format")
    details_parser.add_argument("--async", dest="use_async", action="store_true", help="Use async client")
    
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    if args.verbose:
        logging.getLogger().setLevel(logging.INFO)
    
    config = Config()
    
    try:
        if args.command == "search":
            if args.use_async:
                return asyncio.run(search_books_async(args, config))
            return search_books_sync(args, config)
        
        elif args.command == "details":
            if args.use_async:
                return asyncio.run(show_details_async(args, config))
            return show_details_sync(args, config)
    
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
    
    return 1


if __name__ == "__main__":
    sys.exit(main())
