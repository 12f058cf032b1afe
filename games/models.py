from django.conf import settings
from django.db import models
from django.utils import timezone

from games.constants import AwardType, AWARD_EXTRA_HARDCORE, AWARD_EXTRA_SOFTCORE


class System(models.Model):
    id = models.PositiveIntegerField(primary_key=True, help_text="Console ID as used by emulators and hash tables.")
    name = models.CharField(max_length=255)
    name_short = models.CharField(max_length=20, blank=True)
    manufacturer = models.CharField(max_length=80, blank=True)
    active = models.BooleanField(default=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name


class Game(models.Model):
    title = models.CharField(max_length=255)
    system = models.ForeignKey(System, on_delete=models.PROTECT, related_name='games')
    image_icon = models.CharField(max_length=50, default='/Images/000001.png')
    image_title = models.CharField(max_length=50, blank=True)
    image_ingame = models.CharField(max_length=50, blank=True)
    image_box_art = models.CharField(max_length=50, blank=True)
    publisher = models.CharField(max_length=50, blank=True)
    developer = models.CharField(max_length=50, blank=True)
    genre = models.CharField(max_length=50, blank=True)
    released_at = models.DateField(blank=True, null=True)
    achievements_published = models.PositiveIntegerField(default=0)
    points_total = models.PositiveIntegerField(default=0)
    players_total = models.PositiveIntegerField(default=0, help_text="Denormalized count of users that have played the game.")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'GameData'
        indexes = [
            models.Index(fields=['system', 'title'], name='game_system_title_idx'),
        ]

    def __str__(self):
        return self.title


class Achievement(models.Model):
    game = models.ForeignKey(Game, on_delete=models.CASCADE, related_name='achievements')
    title = models.CharField(max_length=64)
    description = models.CharField(max_length=255, blank=True)
    points = models.PositiveIntegerField(default=0)
    badge_name = models.CharField(max_length=8, default='00001')
    order_column = models.IntegerField(default=0)
    is_published = models.BooleanField(default=True)

    class Meta:
        ordering = ['order_column', 'id']
        indexes = [
            models.Index(fields=['game', 'is_published'], name='achievement_game_pub_idx'),
        ]

    def __str__(self):
        return self.title


class PlayerGame(models.Model):
    """Per-user progress on one game, with denormalized unlock counters."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='player_games')
    game = models.ForeignKey(Game, on_delete=models.CASCADE, related_name='player_games')
    achievements_total = models.PositiveIntegerField(default=0)
    achievements_unlocked = models.PositiveIntegerField(default=0)
    achievements_unlocked_hardcore = models.PositiveIntegerField(default=0)
    points_total = models.PositiveIntegerField(blank=True, null=True)
    points = models.PositiveIntegerField(default=0)
    points_hardcore = models.PositiveIntegerField(default=0)
    time_to_beat = models.PositiveIntegerField(blank=True, null=True, help_text="Seconds from first play to beating the game (softcore).")
    time_to_beat_hardcore = models.PositiveIntegerField(blank=True, null=True, help_text="Seconds from first play to beating the game (hardcore).")
    time_to_complete = models.PositiveIntegerField(blank=True, null=True, help_text="Seconds from first play to completion (softcore).")
    time_to_complete_hardcore = models.PositiveIntegerField(blank=True, null=True, help_text="Seconds from first play to mastery.")
    last_played_at = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user', 'game'], name='player_game_unique'),
        ]
        indexes = [
            models.Index(fields=['user', 'last_played_at'], name='player_game_recent_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.game}"


class PlayerAchievement(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='player_achievements')
    achievement = models.ForeignKey(Achievement, on_delete=models.CASCADE, related_name='player_achievements')
    unlocked_at = models.DateTimeField(blank=True, null=True)
    unlocked_hardcore_at = models.DateTimeField(blank=True, null=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['user', 'achievement'], name='player_achievement_unique'),
        ]

    @property
    def is_unlocked(self):
        return self.unlocked_at is not None or self.unlocked_hardcore_at is not None


class PlayerBadge(models.Model):
    """
    A site award held by a user.

    For game awards (mastery, beaten) award_data holds the game id and
    award_data_extra separates the hardcore variant from the softcore one.
    """
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='player_badges')
    award_type = models.PositiveSmallIntegerField(choices=AwardType.choices)
    award_data = models.IntegerField(blank=True, null=True)
    award_data_extra = models.PositiveSmallIntegerField(
        default=AWARD_EXTRA_SOFTCORE,
        choices=[(AWARD_EXTRA_SOFTCORE, 'Softcore'), (AWARD_EXTRA_HARDCORE, 'Hardcore')],
    )
    awarded_at = models.DateTimeField(default=timezone.now)
    display_order = models.SmallIntegerField(default=0)

    class Meta:
        indexes = [
            models.Index(fields=['user', 'award_type'], name='player_badge_user_type_idx'),
            models.Index(fields=['award_data'], name='player_badge_data_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.get_award_type_display()} ({self.award_data})"
