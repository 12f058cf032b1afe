"""
Profile data service - Gathers the raw rows behind a user's recently played panel.

Reads the user's most recently played games, the achievement sets of those
games with the user's unlocks, the per-game progress counters and the user's
award history, and packages them in the shape the recently played service
consumes.
"""
import logging
from dataclasses import dataclass, field

from community.records import AchievementUnlock, AwardSummary, RecentlyPlayedEntry, UserAward

logger = logging.getLogger(__name__)


@dataclass
class RecentlyPlayedInputs:
    recently_played_entities: list = field(default_factory=list)
    recent_achievement_entities: dict = field(default_factory=dict)
    recent_awarded_entities: dict = field(default_factory=dict)
    user_awards: list = field(default_factory=list)


def _build_unlock(achievement, player_achievement):
    if player_achievement is None:
        return AchievementUnlock(
            badge_name=achievement.badge_name,
            is_awarded=False,
            hardcore_achieved=False,
            title=achievement.title,
        )
    return AchievementUnlock(
        badge_name=achievement.badge_name,
        is_awarded=player_achievement.is_unlocked,
        hardcore_achieved=player_achievement.unlocked_hardcore_at is not None,
        date_awarded=player_achievement.unlocked_hardcore_at or player_achievement.unlocked_at,
        title=achievement.title,
    )


def get_recently_played_inputs(user, count) -> RecentlyPlayedInputs:
    """
    Load the raw panel inputs for a user.

    Args:
        user: User whose profile is being rendered
        count: Number of recently played games to load

    Returns:
        RecentlyPlayedInputs: Entries most recent first, achievements and
        progress keyed by game id, award history oldest first
    """
    from games.models import Achievement, PlayerAchievement, PlayerBadge, PlayerGame

    player_games = list(
        PlayerGame.objects
        .filter(user=user)
        .select_related('game')
        .order_by('-last_played_at', '-id')[:max(count, 0)]
    )
    game_ids = [pg.game_id for pg in player_games]

    inputs = RecentlyPlayedInputs()
    for pg in player_games:
        inputs.recently_played_entities.append(RecentlyPlayedEntry(
            game_id=pg.game_id,
            console_id=pg.game.system_id,
            image_icon=pg.game.image_icon,
            title=pg.game.title,
            last_played=pg.last_played_at,
        ))
        inputs.recent_awarded_entities[pg.game_id] = AwardSummary(
            num_achieved=pg.achievements_unlocked,
            num_possible_achievements=pg.achievements_total,
            num_achieved_hardcore=pg.achievements_unlocked_hardcore,
            score_achieved=pg.points,
            score_achieved_hardcore=pg.points_hardcore,
            possible_score=pg.points_total if pg.points_total is not None else pg.game.points_total,
        )

    unlocks = {
        pa.achievement_id: pa
        for pa in PlayerAchievement.objects.filter(user=user, achievement__game_id__in=game_ids)
    }
    achievements = Achievement.objects.filter(game_id__in=game_ids, is_published=True).order_by('order_column', 'id')
    for achievement in achievements:
        inputs.recent_achievement_entities.setdefault(achievement.game_id, []).append(
            _build_unlock(achievement, unlocks.get(achievement.id))
        )

    inputs.user_awards = [
        UserAward(
            award_data=badge.award_data,
            award_type=badge.award_type,
            award_data_extra=badge.award_data_extra,
            awarded_at=badge.awarded_at,
        )
        for badge in PlayerBadge.objects.filter(user=user).order_by('awarded_at', 'id')
    ]

    logger.debug(
        f"Loaded recently played inputs for {user.username}: {len(player_games)} games, "
        f"{len(unlocks)} unlocks, {len(inputs.user_awards)} awards"
    )
    return inputs


def build_user_recently_played(user, count):
    """Return a UserRecentlyPlayed component populated from the database."""
    from community.components import UserRecentlyPlayed

    inputs = get_recently_played_inputs(user, count)
    return UserRecentlyPlayed(
        recently_played_count=count,
        recently_played_entities=inputs.recently_played_entities,
        recent_achievement_entities=inputs.recent_achievement_entities,
        recent_awarded_entities=inputs.recent_awarded_entities,
        target_username=user.username,
        target_user_id=user.id,
        user_awards=inputs.user_awards,
    )
