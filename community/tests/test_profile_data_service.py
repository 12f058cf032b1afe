"""
Test suite for the database-backed recently played panel.

Covers:
- Loading raw panel inputs from PlayerGame, Achievement, PlayerAchievement and PlayerBadge
- Rendering the panel through the component, template tag, profile view and management command
"""
from datetime import datetime, timedelta, timezone as dt_timezone
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.template import Context, Template
from django.test import TestCase
from django.urls import reverse

from community.services.profile_data_service import build_user_recently_played, get_recently_played_inputs
from games.constants import AwardKind, AwardType
from games.models import Achievement, Game, PlayerAchievement, PlayerBadge, PlayerGame, System

User = get_user_model()


class RecentlyPlayedDataTestCase(TestCase):
    """Base test case with a user who played three games."""

    def setUp(self):
        self.user = User.objects.create_user(username='Scott', email='scott@example.com', password='testpass123')
        self.other_user = User.objects.create_user(username='Jamiras', email='jamiras@example.com', password='testpass123')

        self.genesis = System.objects.create(id=1, name='Genesis/Mega Drive', name_short='MD')
        self.snes = System.objects.create(id=3, name='SNES/Super Famicom', name_short='SNES')

        self.sonic = Game.objects.create(title='Sonic the Hedgehog', system=self.genesis, points_total=400)
        self.mario = Game.objects.create(title='Super Mario World', system=self.snes, points_total=300)
        self.zelda = Game.objects.create(title='A Link to the Past', system=self.snes, points_total=500)

        self.now = datetime(2024, 6, 1, 12, 0, 0, tzinfo=dt_timezone.utc)

        self.sonic_achievements = [
            Achievement.objects.create(game=self.sonic, title='Ring Collector', badge_name='10001', points=10, order_column=2),
            Achievement.objects.create(game=self.sonic, title='Emerald Hunter', badge_name='10002', points=25, order_column=1),
            Achievement.objects.create(game=self.sonic, title='Unpublished', badge_name='10003', is_published=False),
        ]
        Achievement.objects.create(game=self.mario, title='Cape Feather', badge_name='20001', points=5)

        PlayerGame.objects.create(
            user=self.user, game=self.sonic, last_played_at=self.now,
            achievements_total=2, achievements_unlocked=2, achievements_unlocked_hardcore=1,
            points=35, points_hardcore=25, time_to_complete_hardcore=5400,
        )
        PlayerGame.objects.create(
            user=self.user, game=self.mario, last_played_at=self.now - timedelta(days=1),
            achievements_total=1, achievements_unlocked=0, achievements_unlocked_hardcore=0,
        )
        PlayerGame.objects.create(
            user=self.user, game=self.zelda, last_played_at=self.now - timedelta(days=2),
        )

        PlayerAchievement.objects.create(
            user=self.user, achievement=self.sonic_achievements[0],
            unlocked_at=self.now - timedelta(hours=5),
        )
        PlayerAchievement.objects.create(
            user=self.user, achievement=self.sonic_achievements[1],
            unlocked_at=self.now - timedelta(hours=3), unlocked_hardcore_at=self.now - timedelta(hours=3),
        )

        PlayerBadge.objects.create(
            user=self.user, award_type=AwardType.GAME_BEATEN, award_data=self.sonic.id,
            award_data_extra=1, awarded_at=self.now - timedelta(hours=4),
        )
        PlayerBadge.objects.create(
            user=self.user, award_type=AwardType.MASTERY, award_data=self.sonic.id,
            award_data_extra=1, awarded_at=self.now - timedelta(hours=3),
        )
        PlayerBadge.objects.create(
            user=self.other_user, award_type=AwardType.MASTERY, award_data=self.mario.id,
            award_data_extra=1, awarded_at=self.now,
        )


class GetRecentlyPlayedInputsTests(RecentlyPlayedDataTestCase):

    def test_entries_most_recent_first(self):
        inputs = get_recently_played_inputs(self.user, 5)
        self.assertEqual(
            [e.game_id for e in inputs.recently_played_entities],
            [self.sonic.id, self.mario.id, self.zelda.id],
        )
        self.assertEqual(inputs.recently_played_entities[0].console_id, self.genesis.id)

    def test_count_limits_games(self):
        inputs = get_recently_played_inputs(self.user, 1)
        self.assertEqual(len(inputs.recently_played_entities), 1)
        self.assertEqual(list(inputs.recent_awarded_entities), [self.sonic.id])

    def test_achievements_ordered_and_published_only(self):
        inputs = get_recently_played_inputs(self.user, 5)
        unlocks = inputs.recent_achievement_entities[self.sonic.id]

        self.assertEqual([u.badge_name for u in unlocks], ['10002', '10001'])
        self.assertTrue(unlocks[0].hardcore_achieved)
        self.assertEqual(unlocks[0].date_awarded, self.now - timedelta(hours=3))
        self.assertTrue(unlocks[1].is_awarded)
        self.assertFalse(unlocks[1].hardcore_achieved)

    def test_locked_achievements_included(self):
        inputs = get_recently_played_inputs(self.user, 5)
        unlock = inputs.recent_achievement_entities[self.mario.id][0]
        self.assertFalse(unlock.is_awarded)
        self.assertIsNone(unlock.date_awarded)

    def test_award_summary_uses_game_points_when_unset(self):
        inputs = get_recently_played_inputs(self.user, 5)
        summary = inputs.recent_awarded_entities[self.sonic.id]
        self.assertEqual(summary.num_achieved, 2)
        self.assertEqual(summary.num_possible_achievements, 2)
        self.assertEqual(summary.possible_score, 400)

    def test_user_awards_only_for_user_in_date_order(self):
        inputs = get_recently_played_inputs(self.user, 5)
        self.assertEqual([a.award_type for a in inputs.user_awards], [AwardType.GAME_BEATEN, AwardType.MASTERY])


class BuildUserRecentlyPlayedTests(RecentlyPlayedDataTestCase):

    def test_full_pipeline(self):
        context = build_user_recently_played(self.user, 5).get_context_data()
        games = context['processed_recently_played_entities']

        self.assertEqual(context['target_username'], 'Scott')
        self.assertEqual(len(games), 3)

        sonic = games[0]
        self.assertEqual(sonic.highest_award_kind, AwardKind.MASTERED)
        self.assertEqual(sonic.highest_award_date, self.now - timedelta(hours=3))
        self.assertEqual(sonic.highest_award_time_taken, 5400)
        self.assertEqual(sonic.pct_won, 1.0)
        self.assertEqual(sonic.pct_won_hc, 0.5)
        self.assertEqual(sonic.first_won_date, self.now - timedelta(hours=5))
        self.assertEqual(sonic.console_name, 'Genesis/Mega Drive')

        mario = games[1]
        self.assertIsNone(mario.highest_award_kind)
        self.assertEqual(mario.pct_won, 0.0)
        self.assertEqual(mario.console_name_short, 'SNES')

        zelda = games[2]
        self.assertIsNone(zelda.pct_won)
        self.assertEqual(zelda.achievement_avatars, [])

    def test_template_tag(self):
        html = Template('{% load community_tags %}{% user_recently_played user 1 %}').render(Context({'user': self.user}))
        self.assertIn('Sonic the Hedgehog', html)
        self.assertNotIn('Super Mario World', html)


class UserProfileViewTests(RecentlyPlayedDataTestCase):

    def test_profile_renders_panel(self):
        response = self.client.get(reverse('user_profile', args=['scott']))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['recently_played_count'], 5)
        self.assertContains(response, 'Sonic the Hedgehog')
        self.assertContains(response, 'award-mastered')
        self.assertContains(response, '1h 30m')

    def test_count_parameter(self):
        response = self.client.get(reverse('user_profile', args=['Scott']), {'count': '2'})
        self.assertContains(response, 'Super Mario World')
        self.assertNotContains(response, 'A Link to the Past')

    def test_count_parameter_clamped(self):
        response = self.client.get(reverse('user_profile', args=['Scott']), {'count': '500'})
        self.assertEqual(response.context['recently_played_count'], 15)

        response = self.client.get(reverse('user_profile', args=['Scott']), {'count': 'lots'})
        self.assertEqual(response.context['recently_played_count'], 5)

    def test_unknown_user_404(self):
        response = self.client.get(reverse('user_profile', args=['nobody']))
        self.assertEqual(response.status_code, 404)

    def test_untracked_user_404(self):
        self.user.untracked = True
        self.user.save(update_fields=['untracked'])
        response = self.client.get(reverse('user_profile', args=['Scott']))
        self.assertEqual(response.status_code, 404)


class RecentlyPlayedReportCommandTests(RecentlyPlayedDataTestCase):

    def test_report(self):
        out = StringIO()
        call_command('recently_played_report', 'scott', '--count', '2', stdout=out)
        output = out.getvalue()

        self.assertIn('Recently played by Scott (2 of 2):', output)
        self.assertIn('[MD] Sonic the Hedgehog: 2/2 (100%, hardcore 50%) - mastered in 1h 30m', output)
        self.assertIn('[SNES] Super Mario World: 0/1', output)

    def test_unknown_user(self):
        out = StringIO()
        call_command('recently_played_report', 'nobody', stdout=out)
        self.assertIn('does not exist', out.getvalue())

    def test_no_games(self):
        out = StringIO()
        call_command('recently_played_report', 'Jamiras', stdout=out)
        self.assertIn('Jamiras has not played any games.', out.getvalue())
