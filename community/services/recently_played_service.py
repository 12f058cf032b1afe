"""
Recently played service - Builds the recently played panel for a user profile.

For each recently played game this service merges:
- Game identity (title, icon, console, last played date)
- Achievement progress (counts, percentages, scores, badge avatars)
- The highest-priority game award the user holds (mastered > completed >
  beaten hardcore > beaten softcore)

and then runs two batched enrichment passes over the result: time taken to
earn each award (one lookup per award kind) and console display names (one
lookup for all consoles).

All inputs are read-only; records are never mutated after construction, the
enrichment passes return new records.
"""
import logging
from collections.abc import Mapping
from dataclasses import replace

from community.exceptions import SystemNotFoundError
from community.records import (
    AchievementSummary,
    AchievementUnlock,
    AwardSelection,
    AwardSummary,
    GameSummary,
    RecentlyPlayedEntry,
    UserAward,
    record_values,
)
from community.utils import achievement_avatar
from games.constants import AwardKind, AwardType, AWARD_EXTRA_HARDCORE, award_kind_priority

logger = logging.getLogger(__name__)

AVATAR_ICON_SIZE = 48
AVATAR_CLASS = 'badgeimglarge'
AVATAR_HARDCORE_CLASS = 'goldimage'
LOCKED_ICON_SUFFIX = '_lock'


# ---------------------------------------------------------------------------
# Awards
# ---------------------------------------------------------------------------

def determine_award_kind(award_type, award_data_extra):
    """
    Map an award type and its hardcore flag to an AwardKind.

    Returns None for award types that are not game awards.
    """
    hardcore = award_data_extra == AWARD_EXTRA_HARDCORE
    if award_type == AwardType.MASTERY:
        return AwardKind.MASTERED if hardcore else AwardKind.COMPLETED
    if award_type == AwardType.GAME_BEATEN:
        return AwardKind.BEATEN_HARDCORE if hardcore else AwardKind.BEATEN_SOFTCORE
    return None


def is_candidate_award_higher_priority(existing_kind, candidate_kind) -> bool:
    """True when candidate_kind strictly outranks existing_kind."""
    return award_kind_priority(candidate_kind) > award_kind_priority(existing_kind)


def process_awards(user_awards, target_game_id) -> AwardSelection:
    """
    Pick the highest-priority award a user holds for one game.

    Awards are scanned in the order given. On equal priority the first award
    seen is kept, so callers that want the earliest award to win must pass the
    history in chronological order.
    """
    selection = AwardSelection()

    for award in user_awards:
        if award.award_data != target_game_id:
            continue

        candidate_kind = determine_award_kind(award.award_type, award.award_data_extra)
        if is_candidate_award_higher_priority(selection.highest_award_kind, candidate_kind):
            selection = AwardSelection(
                highest_award_kind=candidate_kind,
                highest_award_date=award.awarded_at,
            )

    return selection


# ---------------------------------------------------------------------------
# Achievements
# ---------------------------------------------------------------------------

def build_achievement_avatar(unlock, avatar_renderer=achievement_avatar):
    """Render the badge for one achievement: locked icon, gold frame for hardcore."""
    icon = unlock.badge_name
    icon_class = AVATAR_CLASS

    if not unlock.is_awarded:
        icon += LOCKED_ICON_SUFFIX
    elif unlock.hardcore_achieved:
        icon_class = AVATAR_HARDCORE_CLASS

    return avatar_renderer(
        unlock,
        label=False,
        icon=icon,
        icon_size=AVATAR_ICON_SIZE,
        icon_class=icon_class,
    )


def get_first_won_date(unlocks):
    """Earliest unlock date, ignoring null and empty values."""
    dates = [u.date_awarded for u in unlocks if u.date_awarded is not None and u.date_awarded != '']
    return min(dates, default=None)


def process_achievements(unlocks=(), award_summary=None, avatar_renderer=achievement_avatar) -> AchievementSummary:
    """
    Summarize a user's achievement progress on one game.

    Percentages and scores are only filled in when the game has achievements;
    without an award summary everything stays at its empty default.
    """
    summary = AchievementSummary()

    if award_summary is not None:
        summary.num_awarded = award_summary.num_achieved
        summary.max_possible = award_summary.num_possible_achievements

        if summary.max_possible > 0:
            summary.pct_won_hc = award_summary.num_achieved_hardcore / summary.max_possible
            summary.pct_won = award_summary.num_achieved / summary.max_possible

            summary.max_possible_score = award_summary.possible_score or 0
            summary.score_earned_hardcore = award_summary.score_achieved_hardcore
            summary.score_earned_softcore = award_summary.score_achieved

    summary.achievement_avatars = [build_achievement_avatar(u, avatar_renderer) for u in unlocks]
    summary.first_won_date = get_first_won_date(unlocks)

    return summary


# ---------------------------------------------------------------------------
# Per-game processing
# ---------------------------------------------------------------------------

def extract_game_information(entry) -> dict:
    return {
        'game_id': entry.game_id,
        'console_id': entry.console_id,
        'image_icon': entry.image_icon,
        'title': entry.title,
        'most_recent_won_date': entry.last_played,
    }


def process_recently_played_entity(entry, unlocks=(), award_summary=None, user_awards=(),
                                   avatar_renderer=achievement_avatar) -> GameSummary:
    """Merge game identity, achievement progress and award selection into one GameSummary."""
    return GameSummary(
        **extract_game_information(entry),
        **record_values(process_achievements(unlocks, award_summary, avatar_renderer)),
        **record_values(process_awards(user_awards, entry.game_id)),
    )


# ---------------------------------------------------------------------------
# Batch enrichment
# ---------------------------------------------------------------------------

def group_by_award_kind(summaries) -> dict:
    """Group game ids by highest award kind, in first-seen order. Games without an award are skipped."""
    groups = {}
    for summary in summaries:
        if summary.highest_award_kind is None:
            continue
        groups.setdefault(summary.highest_award_kind, []).append(summary.game_id)
    return groups


def merge_award_time_taken(summaries, award_kind, times) -> list:
    """Return summaries with time taken filled in for games whose highest award is award_kind."""
    return [
        replace(s, highest_award_time_taken=times.get(s.game_id))
        if s.highest_award_kind == award_kind else s
        for s in summaries
    ]


def merge_console_names(summaries, systems) -> list:
    """
    Return summaries with console names filled in.

    Raises:
        SystemNotFoundError: If a summary references a console missing from systems
    """
    systems_by_id = {system.id: system for system in systems}

    merged = []
    for summary in summaries:
        system = systems_by_id.get(summary.console_id)
        if system is None:
            raise SystemNotFoundError(summary.console_id)
        merged.append(replace(summary, console_name=system.name, console_name_short=system.name_short))
    return merged


def _default_time_taken_lookup(user_id, game_ids, award_kind):
    from games.services.award_time_taken_service import get_award_time_taken
    return get_award_time_taken(user_id, game_ids, award_kind)


def _default_system_lookup(console_ids):
    from games.services.system_service import get_systems
    return get_systems(console_ids)


def _rows_for_game(keyed_rows, game_id):
    rows = keyed_rows.get(game_id) if keyed_rows else None
    if rows is None:
        return []
    if isinstance(rows, Mapping):
        # Rows keyed by achievement id
        rows = rows.values()
    return [AchievementUnlock.from_row(row) for row in rows]


def _summary_for_game(keyed_summaries, game_id):
    row = keyed_summaries.get(game_id) if keyed_summaries else None
    if not row:
        return None
    return AwardSummary.from_row(row)


def process_all_recently_played_entities(
    recently_played_count,
    raw_recently_played_entities=(),
    recent_achievement_entities=None,
    recent_awarded_entities=None,
    user_awards=(),
    target_user_id=0,
    time_taken_lookup=None,
    system_lookup=None,
    avatar_renderer=achievement_avatar,
) -> list:
    """
    Build the GameSummary list for a user's recently played panel.

    Args:
        recently_played_count: Number of entries to keep, in input order
        raw_recently_played_entities: Recently played rows, most recent first
        recent_achievement_entities: game_id -> achievement unlock rows
        recent_awarded_entities: game_id -> award summary row
        user_awards: The user's full award history
        target_user_id: User the panel is built for
        time_taken_lookup: callable(user_id, game_ids, award_kind) -> {game_id: seconds}
        system_lookup: callable(console_ids) -> iterable of System-like objects
        avatar_renderer: callable rendering one achievement badge

    Returns:
        list: GameSummary records, same order as the input

    Raises:
        InvalidRecordError: If a row has unknown or missing fields
        SystemNotFoundError: If a console id has no System
    """
    time_taken_lookup = time_taken_lookup or _default_time_taken_lookup
    system_lookup = system_lookup or _default_system_lookup

    entries = [
        RecentlyPlayedEntry.from_row(row)
        for row in list(raw_recently_played_entities)[:max(recently_played_count, 0)]
    ]
    awards = [UserAward.from_row(row) for row in user_awards]

    summaries = [
        process_recently_played_entity(
            entry,
            _rows_for_game(recent_achievement_entities, entry.game_id),
            _summary_for_game(recent_awarded_entities, entry.game_id),
            awards,
            avatar_renderer,
        )
        for entry in entries
    ]

    for award_kind, game_ids in group_by_award_kind(summaries).items():
        logger.debug(f"Looking up {award_kind} time taken for user {target_user_id}: {len(game_ids)} games")
        times = time_taken_lookup(target_user_id, set(game_ids), award_kind)
        summaries = merge_award_time_taken(summaries, award_kind, times)

    console_ids = list(dict.fromkeys(s.console_id for s in summaries))
    if console_ids:
        summaries = merge_console_names(summaries, system_lookup(set(console_ids)))

    logger.debug(f"Processed {len(summaries)} recently played games for user {target_user_id}")
    return summaries
