"""Split an osu! match record into its games.

In osu!, one 'match' has multiple 'games', where every game is a round in
which all players play one beatmap. The match record lists the players
under 'users' and everything that happened under 'events'; only some
events carry a 'game'.
"""

from .models import GameEvent, OtherEvent, ReconciliationContext


def classify_event(event: dict) -> GameEvent | OtherEvent:
    game = event.get('game') if isinstance(event, dict) else None
    if game is not None:
        return GameEvent(game)
    return OtherEvent(event)


def discover_participants(context: ReconciliationContext, match: dict) -> ReconciliationContext:
    """Add every player of the match to the roster, unless a roster was supplied.

    Existing entries are never overwritten.
    """
    if context.whitelist:
        return context

    for user in match.get('users') or []:
        user_id = str(user['id'])
        if user_id not in context.participants:
            context.participants[user_id] = str(user['username'])
    return context


def extract_games(match: dict) -> list[dict]:
    """Return the game payloads in event order."""
    games = []
    for event in match.get('events') or []:
        classified = classify_event(event)
        if isinstance(classified, GameEvent):
            games.append(classified.game)
    return games


def decompose_match(context: ReconciliationContext, match: dict):
    """Discover players (outside whitelist mode) and return (context, games)."""
    context = discover_participants(context, match)
    return context, extract_games(match)
