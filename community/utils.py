"""
Rendering helpers for community panels.
"""
from django.conf import settings
from django.utils.html import format_html


def achievement_badge_url(icon):
    """URL of an achievement badge image for an icon key such as '12345' or '12345_lock'."""
    return f"{settings.ACHIEVEMENT_BADGE_URL}{icon}.png"


def achievement_avatar(achievement, label=False, icon=None, icon_size=48, icon_class='badgeimglarge'):
    """
    Render an achievement badge image.

    Args:
        achievement: AchievementUnlock (or any object with badge_name/title)
        label: Wrap the image with the achievement title when True
        icon: Icon key, defaults to the achievement's badge name
        icon_size: Width and height in pixels
        icon_class: CSS class of the <img>

    Returns:
        SafeString: HTML fragment
    """
    icon = icon or achievement.badge_name
    title = getattr(achievement, 'title', None) or ''

    image = format_html(
        '<img src="{}" width="{}" height="{}" class="{}" alt="{}" loading="lazy" decoding="async">',
        achievement_badge_url(icon),
        icon_size,
        icon_size,
        icon_class,
        title or icon,
    )
    if not label:
        return image

    return format_html('<span class="inline-flex items-center gap-x-1">{}<span>{}</span></span>', image, title)
