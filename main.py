#!/usr/bin/env python3
"""
Spotify Browse Client
CLI entry point for querying featured playlists, new releases, categories
and recommendations from the Spotify Web API.
"""

import sys
import asyncio
import argparse
import logging
from datetime import datetime

from config.settings import Settings
from spotify_browse.api import APIError, BrowseApi, SpotifyClient
from spotify_browse.api.browse import RECOMMENDATIONS
from spotify_browse.models.options import (
    RECOMMENDATION_ATTRIBUTES,
    CategoriesOptions,
    CategoryOptions,
    CategoryPlaylistsOptions,
    FeaturedPlaylistsOptions,
    NewReleasesOptions,
    RecommendationOptions,
)
from spotify_browse.utils.query_encoder import Range

logger = logging.getLogger(__name__)

INTEGER_ATTRIBUTES = {"duration_ms", "key", "mode", "popularity", "time_signature"}

def parse_seeds(value):
    """Split a comma-separated seed list, dropping blanks."""
    if not value:
        return []
    return [seed.strip() for seed in value.split(",") if seed.strip()]

def add_country(parser):
    parser.add_argument('--country', type=str, help='ISO 3166-1 alpha-2 country code (e.g. US)')

def add_locale(parser):
    parser.add_argument('--locale', type=str, help='Locale such as es_MX')

def add_pagination(parser):
    parser.add_argument('--limit', type=int, default=20, help='Maximum number of items (default: 20)')
    parser.add_argument('--offset', type=int, default=0, help='Index of the first item (default: 0)')

def build_parser():
    """Build the argument parser with one subcommand per browse resource."""
    parser = argparse.ArgumentParser(description='Spotify Web API browse client')
    parser.add_argument('--log-level', type=str, default=None, help='Override LOG_LEVEL')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    featured_parser = subparsers.add_parser('featured-playlists', help='Get featured playlists')
    add_locale(featured_parser)
    add_country(featured_parser)
    featured_parser.add_argument('--timestamp', type=datetime.fromisoformat,
                                 help='Local time as YYYY-MM-DDTHH:MM:SS')
    add_pagination(featured_parser)

    releases_parser = subparsers.add_parser('new-releases', help='Get new album releases')
    add_country(releases_parser)
    add_pagination(releases_parser)

    category_parser = subparsers.add_parser('category', help='Get a single category')
    category_parser.add_argument('category_id', type=str, help='Category ID (e.g. dinner)')
    add_country(category_parser)
    add_locale(category_parser)

    categories_parser = subparsers.add_parser('categories', help='List categories')
    add_country(categories_parser)
    add_locale(categories_parser)
    add_pagination(categories_parser)

    playlists_parser = subparsers.add_parser('category-playlists', help="Get a category's playlists")
    playlists_parser.add_argument('category_id', type=str, help='Category ID (e.g. dinner)')
    add_country(playlists_parser)
    add_pagination(playlists_parser)

    rec_parser = subparsers.add_parser('recommendations', help='Get recommendations from seeds')
    rec_parser.add_argument('--limit', type=int, default=20, help='Number of tracks (default: 20)')
    rec_parser.add_argument('--market', type=str, help='ISO 3166-1 alpha-2 market code')
    rec_parser.add_argument('--seed-artists', type=parse_seeds, default=[], help='Comma-separated artist IDs')
    rec_parser.add_argument('--seed-genres', type=parse_seeds, default=[], help='Comma-separated genres')
    rec_parser.add_argument('--seed-tracks', type=parse_seeds, default=[], help='Comma-separated track IDs')
    rec_parser.add_argument('--path', type=str, default=RECOMMENDATIONS,
                            help=f'Recommendations resource path (default: {RECOMMENDATIONS})')
    for attr in RECOMMENDATION_ATTRIBUTES:
        value_type = int if attr in INTEGER_ATTRIBUTES else float
        flag = attr.replace('_', '-')
        for prefix in ('min', 'target', 'max'):
            rec_parser.add_argument(f'--{prefix}-{flag}', type=value_type, dest=f'{prefix}_{attr}')

    return parser

def build_options(args):
    """Map parsed arguments to the options object for the selected command."""
    if args.command == 'featured-playlists':
        return FeaturedPlaylistsOptions(locale=args.locale, country=args.country, timestamp=args.timestamp,
                                        limit=args.limit, offset=args.offset)
    if args.command == 'new-releases':
        return NewReleasesOptions(country=args.country, limit=args.limit, offset=args.offset)
    if args.command == 'category':
        return CategoryOptions(country=args.country, locale=args.locale)
    if args.command == 'categories':
        return CategoriesOptions(country=args.country, locale=args.locale, limit=args.limit, offset=args.offset)
    if args.command == 'category-playlists':
        return CategoryPlaylistsOptions(country=args.country, limit=args.limit, offset=args.offset)
    if args.command == 'recommendations':
        ranges = {
            f'{attr}_range': Range(
                min=getattr(args, f'min_{attr}'),
                target=getattr(args, f'target_{attr}'),
                max=getattr(args, f'max_{attr}')
            )
            for attr in RECOMMENDATION_ATTRIBUTES
        }
        return RecommendationOptions(limit=args.limit, market=args.market, seed_artists=args.seed_artists,
                                     seed_genres=args.seed_genres, seed_tracks=args.seed_tracks, **ranges)
    raise ValueError(f"Unknown command: {args.command}")

async def run_command(api, args, options):
    """Dispatch the selected command to the browse API."""
    if args.command == 'featured-playlists':
        return await api.featured_playlists(options)
    if args.command == 'new-releases':
        return await api.new_releases(options)
    if args.command == 'category':
        return await api.category(args.category_id, options)
    if args.command == 'categories':
        return await api.categories(options)
    if args.command == 'category-playlists':
        return await api.category_playlists(args.category_id, options)
    if args.command == 'recommendations':
        return await api.recommendations(options)
    raise ValueError(f"Unknown command: {args.command}")

async def browse(args, settings):
    """Run one browse request and print the decoded result as JSON."""
    options = build_options(args)
    settings.validate()

    async with SpotifyClient(settings=settings) as client:
        recommendations_path = getattr(args, 'path', RECOMMENDATIONS)
        api = BrowseApi(client, recommendations_path=recommendations_path)
        result = await run_command(api, args, options)

    print(result.model_dump_json(indent=2))

def main(argv=None):
    """Main entry point with command line argument parsing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    settings = Settings()
    logging.basicConfig(level=(args.log_level or settings.log_level).upper(), format=settings.log_format)

    try:
        asyncio.run(browse(args, settings))
    except (APIError, ValueError) as e:
        logger.debug("Request failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
