from django.contrib import admin
from .models import System, Game, Achievement, PlayerGame, PlayerAchievement, PlayerBadge


@admin.register(System)
class SystemAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "name_short", "manufacturer", "active")
    list_filter = ("active", "manufacturer")
    search_fields = ("name", "name_short")
    ordering = ("id",)


@admin.register(Game)
class GameAdmin(admin.ModelAdmin):
    list_display = ("title", "id", "system", "achievements_published", "points_total", "players_total")
    list_filter = ("system",)
    search_fields = ("title", "publisher", "developer")
    ordering = ("title",)
    fieldsets = (
        ("Core Info", {"fields": ("title", "system", "released_at", "publisher", "developer", "genre")}),
        ("Media", {"fields": ("image_icon", "image_title", "image_ingame", "image_box_art")}),
        ("Stats", {"fields": ("achievements_published", "points_total", "players_total")}),
    )


@admin.register(Achievement)
class AchievementAdmin(admin.ModelAdmin):
    list_display = ("title", "id", "game", "points", "badge_name", "is_published")
    list_filter = ("is_published",)
    search_fields = ("title", "game__title")
    raw_id_fields = ("game",)


@admin.register(PlayerGame)
class PlayerGameAdmin(admin.ModelAdmin):
    list_display = ("user", "game", "achievements_unlocked", "achievements_unlocked_hardcore", "achievements_total", "last_played_at")
    search_fields = ("user__username__iexact", "game__title")
    raw_id_fields = ("user", "game")
    ordering = ("-last_played_at",)


@admin.register(PlayerAchievement)
class PlayerAchievementAdmin(admin.ModelAdmin):
    list_display = ("user", "achievement", "unlocked_at", "unlocked_hardcore_at")
    search_fields = ("user__username__iexact", "achievement__title")
    raw_id_fields = ("user", "achievement")


@admin.register(PlayerBadge)
class PlayerBadgeAdmin(admin.ModelAdmin):
    list_display = ("user", "award_type", "award_data", "award_data_extra", "awarded_at")
    list_filter = ("award_type", "award_data_extra")
    search_fields = ("user__username__iexact",)
    raw_id_fields = ("user",)
    ordering = ("-awarded_at",)
