"""
Tests for award time-taken and system lookups.
"""
from django.contrib.auth import get_user_model
from django.test import TestCase

from games.constants import AwardKind
from games.models import Game, PlayerGame, System
from games.services.award_time_taken_service import get_award_time_taken
from games.services.system_service import get_systems

User = get_user_model()


class AwardTimeTakenServiceTests(TestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='Scott', email='scott@example.com', password='testpass123')
        self.other_user = User.objects.create_user(username='Jamiras', email='jamiras@example.com', password='testpass123')
        system = System.objects.create(id=1, name='Genesis/Mega Drive', name_short='MD')

        self.game1 = Game.objects.create(title='Sonic the Hedgehog', system=system)
        self.game2 = Game.objects.create(title='Streets of Rage', system=system)
        self.game3 = Game.objects.create(title='Gunstar Heroes', system=system)

        PlayerGame.objects.create(
            user=self.user, game=self.game1,
            time_to_beat=600, time_to_beat_hardcore=700, time_to_complete=800, time_to_complete_hardcore=900,
        )
        PlayerGame.objects.create(user=self.user, game=self.game2, time_to_complete_hardcore=1800)
        PlayerGame.objects.create(user=self.user, game=self.game3)
        PlayerGame.objects.create(user=self.other_user, game=self.game3, time_to_complete_hardcore=60)

    def test_column_per_award_kind(self):
        ids = {self.game1.id}
        self.assertEqual(get_award_time_taken(self.user.id, ids, AwardKind.BEATEN_SOFTCORE), {self.game1.id: 600})
        self.assertEqual(get_award_time_taken(self.user.id, ids, AwardKind.BEATEN_HARDCORE), {self.game1.id: 700})
        self.assertEqual(get_award_time_taken(self.user.id, ids, AwardKind.COMPLETED), {self.game1.id: 800})
        self.assertEqual(get_award_time_taken(self.user.id, ids, AwardKind.MASTERED), {self.game1.id: 900})

    def test_batch_omits_missing_times(self):
        times = get_award_time_taken(self.user.id, {self.game1.id, self.game2.id, self.game3.id}, 'mastered')
        self.assertEqual(times, {self.game1.id: 900, self.game2.id: 1800})

    def test_scoped_to_user(self):
        times = get_award_time_taken(self.other_user.id, [self.game1.id, self.game3.id], AwardKind.MASTERED)
        self.assertEqual(times, {self.game3.id: 60})

    def test_empty_ids_skip_query(self):
        with self.assertNumQueries(0):
            self.assertEqual(get_award_time_taken(self.user.id, set(), AwardKind.MASTERED), {})

    def test_unknown_kind(self):
        with self.assertRaises(ValueError):
            get_award_time_taken(self.user.id, {self.game1.id}, 'platinum')


class SystemServiceTests(TestCase):

    def test_get_systems(self):
        System.objects.create(id=1, name='Genesis/Mega Drive', name_short='MD')
        System.objects.create(id=3, name='SNES/Super Famicom', name_short='SNES')
        System.objects.create(id=7, name='NES/Famicom', name_short='NES')

        systems = get_systems({1, 3, 99})
        self.assertEqual(sorted(s.id for s in systems), [1, 3])
