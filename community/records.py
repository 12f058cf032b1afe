"""
Typed records for the recently played panel.

Input rows arrive keyed by their source column names (GameID, BadgeName,
AwardDataExtra, ...). Each input record converts such a row with from_row(),
which rejects unknown keys and reports missing required ones.
"""
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from community.exceptions import InvalidRecordError


def _from_row(cls, row):
    if isinstance(row, cls):
        return row

    for key in row:
        if key not in cls.SOURCE_KEYS:
            raise InvalidRecordError(f"Unknown {cls.__name__} field: {key}", record=cls.__name__, key=key)

    for key in cls.SOURCE_KEYS:
        if key not in row and key not in cls.OPTIONAL_KEYS:
            raise InvalidRecordError(f"Missing {cls.__name__} field: {key}", record=cls.__name__, key=key)

    return cls(**{attr: row.get(key) for key, attr in cls.SOURCE_KEYS.items()})


def _lenient_int(value):
    """int(value) when it parses, otherwise value unchanged."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def record_values(record) -> Dict[str, Any]:
    """Shallow field -> value mapping of a record."""
    return {f.name: getattr(record, f.name) for f in fields(record)}


@dataclass
class RecentlyPlayedEntry:
    game_id: int
    console_id: int
    last_played: Any
    image_icon: Optional[str] = None
    title: Optional[str] = None

    SOURCE_KEYS: ClassVar[Dict[str, str]] = {
        'GameID': 'game_id',
        'ConsoleID': 'console_id',
        'ImageIcon': 'image_icon',
        'Title': 'title',
        'LastPlayed': 'last_played',
    }
    OPTIONAL_KEYS: ClassVar[Tuple[str, ...]] = ('ImageIcon', 'Title')

    def __post_init__(self):
        self.game_id = int(self.game_id)
        self.console_id = int(self.console_id)

    @classmethod
    def from_row(cls, row):
        return _from_row(cls, row)


@dataclass
class AchievementUnlock:
    badge_name: str
    is_awarded: bool
    hardcore_achieved: bool
    date_awarded: Any = None
    title: Optional[str] = None

    SOURCE_KEYS: ClassVar[Dict[str, str]] = {
        'BadgeName': 'badge_name',
        'IsAwarded': 'is_awarded',
        'HardcoreAchieved': 'hardcore_achieved',
        'DateAwarded': 'date_awarded',
        'Title': 'title',
    }
    OPTIONAL_KEYS: ClassVar[Tuple[str, ...]] = ('DateAwarded', 'Title')

    def __post_init__(self):
        self.is_awarded = bool(self.is_awarded)
        self.hardcore_achieved = bool(self.hardcore_achieved)

    @classmethod
    def from_row(cls, row):
        return _from_row(cls, row)


@dataclass
class AwardSummary:
    """Achievement progress counters for one game."""
    num_achieved: int
    num_possible_achievements: int
    num_achieved_hardcore: int
    score_achieved: int
    score_achieved_hardcore: int
    possible_score: Optional[int] = None

    SOURCE_KEYS: ClassVar[Dict[str, str]] = {
        'NumAchieved': 'num_achieved',
        'NumPossibleAchievements': 'num_possible_achievements',
        'NumAchievedHardcore': 'num_achieved_hardcore',
        'ScoreAchieved': 'score_achieved',
        'ScoreAchievedHardcore': 'score_achieved_hardcore',
        'PossibleScore': 'possible_score',
    }
    OPTIONAL_KEYS: ClassVar[Tuple[str, ...]] = ('PossibleScore',)

    def __post_init__(self):
        # Null counters count as zero
        self.num_achieved = int(self.num_achieved or 0)
        self.num_possible_achievements = int(self.num_possible_achievements or 0)
        self.num_achieved_hardcore = int(self.num_achieved_hardcore or 0)
        self.score_achieved = int(self.score_achieved or 0)
        self.score_achieved_hardcore = int(self.score_achieved_hardcore or 0)
        if self.possible_score is not None:
            self.possible_score = int(self.possible_score)

    @classmethod
    def from_row(cls, row):
        return _from_row(cls, row)


@dataclass
class UserAward:
    """One site award from a user's full award history."""
    award_data: int
    award_type: int
    award_data_extra: int
    awarded_at: Any

    SOURCE_KEYS: ClassVar[Dict[str, str]] = {
        'AwardData': 'award_data',
        'AwardType': 'award_type',
        'AwardDataExtra': 'award_data_extra',
        'AwardedAt': 'awarded_at',
    }
    OPTIONAL_KEYS: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self):
        self.award_data = _lenient_int(self.award_data)
        # Unparseable award types are kept as-is and resolve to no award kind
        self.award_type = _lenient_int(self.award_type)
        self.award_data_extra = _lenient_int(self.award_data_extra or 0)

    @classmethod
    def from_row(cls, row):
        return _from_row(cls, row)


@dataclass
class AwardSelection:
    highest_award_kind: Any = None
    highest_award_date: Any = None


@dataclass
class AchievementSummary:
    num_awarded: int = 0
    max_possible: int = 0
    first_won_date: Any = None
    pct_won: Optional[float] = None
    pct_won_hc: Optional[float] = None
    achievement_avatars: List[str] = field(default_factory=list)
    max_possible_score: Optional[int] = None
    score_earned_hardcore: Optional[int] = None
    score_earned_softcore: Optional[int] = None


@dataclass
class GameSummary:
    """Display-ready summary of one recently played game."""
    game_id: int
    console_id: int
    image_icon: str
    title: str
    most_recent_won_date: Any
    num_awarded: int = 0
    max_possible: int = 0
    first_won_date: Any = None
    pct_won: Optional[float] = None
    pct_won_hc: Optional[float] = None
    achievement_avatars: List[str] = field(default_factory=list)
    max_possible_score: Optional[int] = None
    score_earned_hardcore: Optional[int] = None
    score_earned_softcore: Optional[int] = None
    highest_award_kind: Any = None
    highest_award_date: Any = None
    highest_award_time_taken: Optional[int] = None
    console_name: Optional[str] = None
    console_name_short: Optional[str] = None
