"""Turn a list of match links into a score sheet.

Runs parse -> (fetch -> decompose -> reconcile) per match -> lay out. The
matches are handled one at a time in the order given; the first match that
cannot be retrieved aborts the run before anything is written.
"""

import os

from ..adapters.osu_adapter import OsuMatchFetcher
from .match_decomposer import decompose_match
from .models import (
    CSV_OUTPUT_FILENAME, OUTPUT_FILENAME, DisplaySettings, ReconciliationContext,
)
from .score_reconciler import reconcile_game
from .sheet_layout import write_report
from .sheet_writer import CsvSink, ReportSink, XlsxSink
from .table_parser import parse_map_pool, parse_match_links, parse_participants


def build_context(users: str, map_pool: str) -> ReconciliationContext:
    """Parse the roster and pool text into a fresh context.

    An empty roster means players are discovered from the matches.
    """
    return ReconciliationContext.from_tables(parse_participants(users),
                                             parse_map_pool(map_pool))


def reconcile_matches(context: ReconciliationContext, match_links: list[str],
                      fetcher, settings: DisplaySettings) -> ReconciliationContext:
    """Fetch every match in order and fold its games into the context."""
    for link in match_links:
        match = fetcher.fetch(link)
        if match is None:
            continue
        context, games = decompose_match(context, match)
        for game in games:
            context = reconcile_game(context, game, settings.maps_outside_pool)
        context.matches_processed += 1
    return context


def output_path_for(output_dir: str, sink: ReportSink) -> str:
    filename = CSV_OUTPUT_FILENAME if isinstance(sink, CsvSink) else OUTPUT_FILENAME
    return os.path.join(output_dir, filename)


def parse_matches(match_links: str, users: str, map_pool: str, output_dir: str,
                  settings: DisplaySettings, fetcher=None, sink: ReportSink | None = None,
                  context: ReconciliationContext | None = None) -> str:
    """Build the sheet and return a message saying where it is.

    Args:
        match_links: Match links (or ids), one per line.
        users: Roster as "name:userId" lines; empty to take everyone who played.
        map_pool: Pool as "name:beatmapId" lines.
        output_dir: Directory the sheet is written to.
        settings: DisplaySettings toggles.
        fetcher: BaseFetcher; defaults to an OsuMatchFetcher that is closed
                 when the run ends. A fetcher passed in is left open.
        sink: ReportSink; defaults to XlsxSink.
        context: Optional pre-built context (see build_context), e.g. to
                 print a report afterwards.

    Raises:
        RetrievalError: a match could not be fetched. Nothing is written.
        PersistenceError: the sheet could not be saved.
    """
    if fetcher is None:
        with OsuMatchFetcher() as own_fetcher:
            return parse_matches(match_links, users, map_pool, output_dir, settings,
                                 fetcher=own_fetcher, sink=sink, context=context)
    if sink is None:
        sink = XlsxSink()
    if context is None:
        context = build_context(users, map_pool)

    context = reconcile_matches(context, parse_match_links(match_links), fetcher, settings)

    path = output_path_for(output_dir, sink)
    write_report(context, settings, sink, path)
    return f"You can find the sheet at: {path}"
