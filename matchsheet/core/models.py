"""Data models for the match sheet builder."""

from dataclasses import dataclass, field


OUTPUT_FILENAME = 'output.xlsx'
CSV_OUTPUT_FILENAME = 'output.csv'
SHEET_TITLE = 'Users'
NAME_HEADER = 'Name'


@dataclass
class DisplaySettings:
    """Column toggles for the output sheet."""
    show_score: bool = True
    show_accuracy: bool = True
    show_mods: bool = False
    empty_column: bool = False       # blank column after every map group
    show_scoring_type: bool = False
    maps_outside_pool: bool = False  # admit maps that are not in the pool

    @classmethod
    def from_flags(cls, flags) -> 'DisplaySettings':
        """Build from [score, acc, mods, emptyColumn, scoringType, outsidePool]."""
        flags = list(flags) + [False] * (6 - len(flags))
        return cls(*(bool(f) for f in flags[:6]))

    @property
    def field_count(self) -> int:
        return sum((self.show_score, self.show_accuracy,
                    self.show_mods, self.show_scoring_type))

    @property
    def group_width(self) -> int:
        """Columns taken by one map, including the blank separator."""
        return self.field_count + (1 if self.empty_column else 0)


@dataclass(frozen=True)
class ScoreEntry:
    """One participant's result on one map. All fields are kept as text."""
    scoring_type: str
    score: str
    mods: str
    accuracy: str   # decimal separator is ',' ("98,765")


@dataclass
class MapEntry:
    key: str                  # beatmap id
    name: str | None = None   # display name, the id itself when admitted out of pool
    scores: dict = field(default_factory=dict)  # participant key -> ScoreEntry

    def __post_init__(self):
        if self.name is None:
            self.name = self.key

    def put(self, participant_key: str, score: ScoreEntry) -> None:
        self.scores[participant_key] = score

    def get(self, participant_key: str):
        return self.scores.get(participant_key)


@dataclass
class ReconciliationContext:
    """Lookup tables and counters for one run.

    participants: participant key -> display name
    map_pool:     beatmap key -> MapEntry (insertion order = column order)
    whitelist:    True when a roster was supplied; fixed for the whole run
    """
    participants: dict = field(default_factory=dict)
    map_pool: dict = field(default_factory=dict)
    whitelist: bool = False
    matches_processed: int = 0
    games_seen: int = 0
    games_skipped: int = 0
    scores_recorded: int = 0
    scores_discarded: int = 0
    admitted_maps: list = field(default_factory=list)

    @classmethod
    def from_tables(cls, participants: dict, map_pool: dict) -> 'ReconciliationContext':
        return cls(participants=participants, map_pool=map_pool,
                   whitelist=bool(participants))


@dataclass(frozen=True)
class GameEvent:
    """A timeline event that carries a played game."""
    game: dict


@dataclass(frozen=True)
class OtherEvent:
    """Any other timeline event (joins, host changes, ...)."""
    event: dict
