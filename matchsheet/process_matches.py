#!/usr/bin/env python3
"""CLI entry point for building a score sheet from osu! matches.

Usage:
    python process_matches.py --links links.txt --users users.txt \\
        --pool pool.txt --output ./output/ --mods --empty-column

Input files hold one entry per line:
    links.txt   https://osu.ppy.sh/community/matches/112233 (or just 112233)
    users.txt   name:userId     (leave out --users to take everyone who played)
    pool.txt    name:beatmapId
"""

import argparse
import os
import sys

# Add parent directory to path for imports (skip when frozen by PyInstaller)
if not getattr(sys, 'frozen', False):
    sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from matchsheet.core.errors import MatchSheetError, PersistenceError, RetrievalError
from matchsheet.core.match_parser import build_context, parse_matches
from matchsheet.core.models import DisplaySettings
from matchsheet.core.score_reconciler import print_reconcile_report
from matchsheet.core.sheet_writer import CsvSink, XlsxSink
from matchsheet.core.table_parser import parse_match_links
from matchsheet.adapters.osu_adapter import OsuMatchFetcher
from matchsheet.adapters.json_file_adapter import JsonFileFetcher


def _read_text(path: str | None) -> str:
    """Read an input list; a missing option reads as empty."""
    if not path:
        return ''
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _error_hint(error: MatchSheetError) -> str:
    if isinstance(error, RetrievalError):
        return 'Please check the match links.'
    if isinstance(error, PersistenceError):
        return 'Please check the output directory.'
    return ''


def main():
    parser = argparse.ArgumentParser(description='Build a score sheet from osu! matches')
    parser.add_argument('--links', required=True, help='File with match links or ids, one per line')
    parser.add_argument('--users', default=None,
                        help='File with name:userId lines (default: everyone who played)')
    parser.add_argument('--pool', default=None, help='File with name:beatmapId lines')
    parser.add_argument('--output', required=True, help='Output directory for the sheet')
    parser.add_argument('--format', default='xlsx', choices=['xlsx', 'csv'],
                        help='Sheet format (default: xlsx)')
    parser.add_argument('--source', default='osu', choices=['osu', 'file'],
                        help="'osu' fetches the links, 'file' reads them as saved match JSON files")
    parser.add_argument('--score', action=argparse.BooleanOptionalAction, default=True,
                        help='Show the score of each map')
    parser.add_argument('--acc', action=argparse.BooleanOptionalAction, default=True,
                        help='Show the accuracy of each map')
    parser.add_argument('--mods', action='store_true', help='Show the mods of each map')
    parser.add_argument('--empty-column', action='store_true',
                        help='Put an empty column between maps')
    parser.add_argument('--scoring-type', action='store_true',
                        help='Show the scoring type of each map')
    parser.add_argument('--outside-pool', action='store_true',
                        help='Also include maps that are not in the pool')

    args = parser.parse_args()

    settings = DisplaySettings(
        show_score=args.score,
        show_accuracy=args.acc,
        show_mods=args.mods,
        empty_column=args.empty_column,
        show_scoring_type=args.scoring_type,
        maps_outside_pool=args.outside_pool,
    )

    links = _read_text(args.links)
    users = _read_text(args.users)
    pool = _read_text(args.pool)

    context = build_context(users, pool)
    mode = 'whitelist' if context.whitelist else 'discovering players from matches'
    print(f"Roster: {len(context.participants)} players ({mode})")
    print(f"Pool: {len(context.map_pool)} maps")
    if not context.map_pool and not settings.maps_outside_pool:
        print("Warning: the pool is empty and --outside-pool is off, the sheet will have no maps")

    fetcher = JsonFileFetcher() if args.source == 'file' else OsuMatchFetcher()
    sink = CsvSink() if args.format == 'csv' else XlsxSink()
    os.makedirs(args.output, exist_ok=True)

    print(f"Parsing {len(parse_match_links(links))} matches...")
    with fetcher:
        try:
            result = parse_matches(links, users, pool, args.output, settings,
                                   fetcher=fetcher, sink=sink, context=context)
        except MatchSheetError as e:
            print("Sorry! I could not parse that...")
            print(e)
            hint = _error_hint(e)
            if hint:
                print(hint)
            sys.exit(1)

    print_reconcile_report(context)
    print(f"\n{result}")


if __name__ == '__main__':
    main()
