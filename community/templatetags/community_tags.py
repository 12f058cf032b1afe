"""
Template tags for community profile panels.
"""
from django import template
from django.conf import settings

from community import utils

register = template.Library()


@register.simple_tag
def achievement_avatar(achievement, label=False, icon=None, icon_size=48, icon_class='badgeimglarge'):
    """
    Render an achievement badge.

    Usage in templates:
        {% achievement_avatar unlock icon_size=32 %}
    """
    return utils.achievement_avatar(achievement, label=label, icon=icon, icon_size=icon_size, icon_class=icon_class)


@register.simple_tag
def user_recently_played(user, count=None):
    """
    Render the recently played panel for a user.

    Usage in templates:
        {% user_recently_played target_user 5 %}
    """
    from community.services.profile_data_service import build_user_recently_played

    if count is None:
        count = settings.RECENTLY_PLAYED_DEFAULT_COUNT
    return build_user_recently_played(user, int(count)).render()


@register.filter
def format_time_taken(seconds):
    """
    Format elapsed seconds for display.

    Usage:
        {{ game.highest_award_time_taken|format_time_taken }}  ->  "3h 05m"
    """
    if seconds is None or seconds == '':
        return ''

    seconds = int(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes = remainder // 60

    if hours:
        return f"{hours}h {minutes:02d}m"
    if minutes:
        return f"{minutes}m"
    return f"{seconds}s"


@register.filter
def as_percent(fraction):
    """
    Convert a 0-1 fraction to a whole percent label.

    Usage:
        {{ game.pct_won|as_percent }}  ->  "50%"
    """
    if fraction is None or fraction == '':
        return ''
    return f"{round(float(fraction) * 100)}%"
