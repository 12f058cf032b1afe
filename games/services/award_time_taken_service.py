"""
Award time-taken service - Looks up how long a user took to earn game awards.

PlayerGame stores the elapsed seconds between first play and each award kind
(beaten, beaten hardcore, completed, mastered). This service reads the column
matching a single award kind for a batch of games in one query.
"""
import logging

from games.constants import AwardKind, AWARD_TIME_TAKEN_FIELDS

logger = logging.getLogger(__name__)


def get_award_time_taken(user_id, game_ids, award_kind) -> dict:
    """
    Fetch elapsed seconds to earn an award kind for a batch of games.

    Args:
        user_id: ID of the user who holds the awards
        game_ids: Iterable of game IDs to look up
        award_kind: AwardKind member or its slug

    Returns:
        dict: game_id -> seconds. Games without a recorded time are omitted.

    Raises:
        ValueError: If award_kind is not a known award kind
    """
    from games.models import PlayerGame

    if not isinstance(award_kind, AwardKind):
        award_kind = AwardKind.from_slug(award_kind)
    field = AWARD_TIME_TAKEN_FIELDS[award_kind]

    game_ids = set(game_ids)
    if not game_ids:
        return {}

    rows = (
        PlayerGame.objects
        .filter(user_id=user_id, game_id__in=game_ids)
        .exclude(**{f'{field}__isnull': True})
        .values_list('game_id', field)
    )
    times = dict(rows)

    logger.debug(f"Award time taken ({award_kind}) for user {user_id}: {len(times)}/{len(game_ids)} games")
    return times
