"""
Constants and enumerations for the games app.

Centralizes site award types and the award kinds derived from them, along
with the per-kind columns used for time-taken lookups.
"""
from enum import Enum

from django.db import models


class AwardType(models.IntegerChoices):
    MASTERY = 1, 'Mastery'
    ACHIEVEMENT_UNLOCKS_YIELD = 2, 'Achievement Unlocks Yield'
    ACHIEVEMENT_POINTS_YIELD = 3, 'Achievement Points Yield'
    PATREON_SUPPORTER = 6, 'Patreon Supporter'
    CERTIFIED_LEGEND = 7, 'Certified Legend'
    GAME_BEATEN = 8, 'Game Beaten'


# AwardDataExtra values
AWARD_EXTRA_SOFTCORE = 0
AWARD_EXTRA_HARDCORE = 1


class AwardKind(str, Enum):
    """
    Display kind of a game award, ordered by prestige.

    Each member is its template slug and carries an explicit priority. Higher
    priority wins when a user holds more than one award for the same game.
    """
    MASTERED = ('mastered', 3)
    COMPLETED = ('completed', 2)
    BEATEN_HARDCORE = ('beaten-hardcore', 1)
    BEATEN_SOFTCORE = ('beaten-softcore', 0)

    def __new__(cls, slug, priority):
        member = str.__new__(cls, slug)
        member._value_ = slug
        member.slug = slug
        member.priority = priority
        return member

    def __str__(self):
        return self.slug

    @classmethod
    def from_slug(cls, slug):
        for kind in cls:
            if kind.slug == slug:
                return kind
        raise ValueError(f"Unknown award kind: {slug}")


NO_AWARD_PRIORITY = -1


def award_kind_priority(kind) -> int:
    """Priority of an award kind, -1 when there is none."""
    return kind.priority if kind is not None else NO_AWARD_PRIORITY


# PlayerGame column holding elapsed seconds until each award kind was earned
AWARD_TIME_TAKEN_FIELDS = {
    AwardKind.BEATEN_SOFTCORE: 'time_to_beat',
    AwardKind.BEATEN_HARDCORE: 'time_to_beat_hardcore',
    AwardKind.COMPLETED: 'time_to_complete',
    AwardKind.MASTERED: 'time_to_complete_hardcore',
}
