"""
View components for community pages.

A component gathers everything a partial template needs, runs the
processing for it and renders the partial to a string that can be embedded
in a page.
"""
from django.template.loader import render_to_string

from community.services.recently_played_service import process_all_recently_played_entities


class UserRecentlyPlayed:
    """Recently played games panel on a user profile."""

    template_name = 'community/user/recently_played/index.html'

    def __init__(
        self,
        recently_played_count=0,
        recently_played_entities=(),
        recent_achievement_entities=None,
        recent_awarded_entities=None,
        target_username='',
        target_user_id=0,
        user_awards=(),
        time_taken_lookup=None,
        system_lookup=None,
    ):
        self.recently_played_count = recently_played_count
        self.recently_played_entities = recently_played_entities
        self.recent_achievement_entities = recent_achievement_entities or {}
        self.recent_awarded_entities = recent_awarded_entities or {}
        self.target_username = target_username
        self.target_user_id = target_user_id
        self.user_awards = user_awards
        self.time_taken_lookup = time_taken_lookup
        self.system_lookup = system_lookup

    def get_context_data(self):
        processed = process_all_recently_played_entities(
            self.recently_played_count,
            self.recently_played_entities,
            self.recent_achievement_entities,
            self.recent_awarded_entities,
            self.user_awards,
            target_user_id=self.target_user_id,
            time_taken_lookup=self.time_taken_lookup,
            system_lookup=self.system_lookup,
        )
        return {
            'processed_recently_played_entities': processed,
            'recently_played_count': self.recently_played_count,
            'target_username': self.target_username,
        }

    def render(self, request=None):
        return render_to_string(self.template_name, self.get_context_data(), request=request)
