"""Put the scores of each game into the map pool.

A game is matched to a pool map by beatmap id. Games on maps outside the
pool are dropped unless maps outside of the pool are allowed, in which case
the map is added to the end of the pool under its id. Scores by players
that are not on the roster are dropped.
"""

from .models import MapEntry, ReconciliationContext, ScoreEntry


def _as_text(value) -> str:
    """Render a JSON value the way it reads in the match record."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ','.join(_as_text(v) for v in value)
    return str(value)


def build_score_entry(game: dict, score: dict) -> ScoreEntry:
    return ScoreEntry(
        scoring_type=_as_text(game.get('scoring_type')),
        score=_as_text(score.get('score')),
        mods=_as_text(score.get('mods')),
        accuracy=_as_text(score.get('accuracy')).replace('.', ','),
    )


def resolve_map(context: ReconciliationContext, game: dict,
                maps_outside_pool: bool) -> MapEntry | None:
    """Return the pool entry for the game's beatmap, or None to skip the game.

    Deleted beatmaps come back with beatmap null; beatmap_id is still set.
    """
    beatmap_id = (game.get('beatmap') or {}).get('id')
    if beatmap_id is None:
        beatmap_id = game.get('beatmap_id')
    beatmap_id = _as_text(beatmap_id)
    if not beatmap_id:
        return None
    beatmap = context.map_pool.get(beatmap_id)
    if beatmap is not None:
        return beatmap
    if not maps_outside_pool:
        return None

    beatmap = MapEntry(key=beatmap_id, name=beatmap_id)
    context.map_pool[beatmap_id] = beatmap
    context.admitted_maps.append(beatmap_id)
    return beatmap


def reconcile_game(context: ReconciliationContext, game: dict,
                   maps_outside_pool: bool) -> ReconciliationContext:
    """Record every roster player's score from one game.

    A later score by the same player on the same map replaces the earlier one.
    """
    context.games_seen += 1
    beatmap = resolve_map(context, game, maps_outside_pool)
    if beatmap is None:
        context.games_skipped += 1
        return context

    for score in game.get('scores') or []:
        entry = build_score_entry(game, score)
        user_id = _as_text(score.get('user_id'))
        if user_id not in context.participants:
            context.scores_discarded += 1
            continue
        beatmap.put(user_id, entry)
        context.scores_recorded += 1

    return context


def print_reconcile_report(context: ReconciliationContext) -> None:
    """Print a human-readable summary of the run to stdout."""
    mode = 'whitelist' if context.whitelist else 'discovered from matches'
    print(f"\nReconciled {context.matches_processed} matches, "
          f"{context.games_seen} games "
          f"({context.games_skipped} skipped, outside of the pool)")
    print(f"Players: {len(context.participants)} ({mode})")
    print(f"Maps: {len(context.map_pool)} "
          f"({len(context.admitted_maps)} added from outside of the pool)")
    print(f"Scores: {context.scores_recorded} recorded, "
          f"{context.scores_discarded} dropped (player not on the roster)")

    if context.admitted_maps:
        shown = context.admitted_maps[:15]
        print("Added maps:")
        print('\n'.join(f'  {key}' for key in shown))
        if len(context.admitted_maps) > 15:
            print(f"  ... and {len(context.admitted_maps) - 15} more")

    unscored = [name for key, name in context.participants.items()
                if not any(key in m.scores for m in context.map_pool.values())]
    if unscored:
        print(f"Warning: {len(unscored)} players have no scores: {', '.join(unscored)}")
