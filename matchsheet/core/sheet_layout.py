"""Lay out the reconciled scores as a sheet.

Layout (one row per player, one column group per map):

    Name  | NM1                       | NM2 ...
    Alice | score  acc  mods  type  _ | score ...

Within a group the fields always come in the order score, accuracy, mods,
scoring type, each only when its toggle is on, followed by one empty
column when the empty-column toggle is on. A player without a score on a
map gets empty cells for that group.
"""

from .models import NAME_HEADER, DisplaySettings, ReconciliationContext, ScoreEntry
from .sheet_writer import ReportSink


def _score_fields(score: ScoreEntry | None, settings: DisplaySettings) -> list:
    fields = []
    if settings.show_score:
        fields.append(score.score if score else '')
    if settings.show_accuracy:
        fields.append(score.accuracy if score else '')
    if settings.show_mods:
        fields.append(score.mods if score else '')
    if settings.show_scoring_type:
        fields.append(score.scoring_type if score else '')
    if settings.empty_column:
        fields.append(None)
    return fields


def header_row(context: ReconciliationContext, settings: DisplaySettings) -> dict[int, str]:
    """Return {column: text}; each map name sits above its group's first column."""
    cells = {0: NAME_HEADER}
    column = 1
    for beatmap in context.map_pool.values():
        cells[column] = beatmap.name
        column += settings.group_width
    return cells


def participant_row(context: ReconciliationContext, settings: DisplaySettings,
                    participant_key: str) -> list:
    row = [context.participants[participant_key]]
    for beatmap in context.map_pool.values():
        row.extend(_score_fields(beatmap.get(participant_key), settings))
    return row


def write_report(context: ReconciliationContext, settings: DisplaySettings,
                 sink: ReportSink, path: str) -> str:
    """Write header and player rows to sink, then save it to path.

    Returns:
        The path written. PersistenceError from the sink propagates.
    """
    row = sink.create_row()
    for column, text in header_row(context, settings).items():
        sink.set_cell(row, column, text)

    for participant_key in context.participants:
        row = sink.create_row()
        for column, value in enumerate(participant_row(context, settings, participant_key)):
            sink.set_cell(row, column, value)

    sink.save(path)
    return path
