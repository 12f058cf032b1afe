"""
Print a user's recently played panel as plain text.

Usage:
    python manage.py recently_played_report Scott             # Default count
    python manage.py recently_played_report Scott --count 10  # Ten games
"""
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from community.services.profile_data_service import build_user_recently_played
from community.templatetags.community_tags import as_percent, format_time_taken


class Command(BaseCommand):
    help = "Print the recently played panel for a user."

    def add_arguments(self, parser):
        parser.add_argument('username', type=str, help='Username of the profile to report on.')
        parser.add_argument(
            '--count',
            type=int,
            default=settings.RECENTLY_PLAYED_DEFAULT_COUNT,
            help='Number of recently played games to include.',
        )

    def handle(self, *args, **options):
        username = options['username']
        count = options['count']

        User = get_user_model()
        try:
            user = User.objects.get(username__iexact=username)
        except User.DoesNotExist:
            self.stdout.write(self.style.ERROR(f'Error: user "{username}" does not exist.'))
            return

        context = build_user_recently_played(user, count).get_context_data()
        summaries = context['processed_recently_played_entities']
        if not summaries:
            self.stdout.write(f'{user.username} has not played any games.')
            return

        self.stdout.write(f'Recently played by {user.username} ({len(summaries)} of {count}):')
        for game in summaries:
            line = f'  [{game.console_name_short}] {game.title}: {game.num_awarded}/{game.max_possible}'
            if game.pct_won is not None:
                line += f' ({as_percent(game.pct_won)}, hardcore {as_percent(game.pct_won_hc)})'
            if game.highest_award_kind is not None:
                line += f' - {game.highest_award_kind}'
                if game.highest_award_time_taken is not None:
                    line += f' in {format_time_taken(game.highest_award_time_taken)}'
            self.stdout.write(line)
