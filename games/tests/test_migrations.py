"""
Tests for the GameData.releases column removal.
"""
from django.core.exceptions import FieldDoesNotExist
from django.db import connection
from django.db.migrations.executor import MigrationExecutor
from django.test import SimpleTestCase, TransactionTestCase

from games.models import Game


class GameModelTests(SimpleTestCase):

    def test_releases_field_removed(self):
        with self.assertRaises(FieldDoesNotExist):
            Game._meta.get_field('releases')
        self.assertEqual(Game._meta.db_table, 'GameData')


class RemoveGameReleasesMigrationTests(TransactionTestCase):
    migrate_from = [('games', '0001_initial')]
    migrate_to = [('games', '0002_remove_game_releases')]

    def get_columns(self):
        with connection.cursor() as cursor:
            return [column.name for column in connection.introspection.get_table_description(cursor, 'GameData')]

    def migrate(self, targets):
        executor = MigrationExecutor(connection)
        executor.loader.build_graph()
        executor.migrate(targets)

    def tearDown(self):
        self.migrate(self.migrate_to)
        super().tearDown()

    def test_forward_drops_column(self):
        self.migrate(self.migrate_from)
        self.assertIn('releases', self.get_columns())

        self.migrate(self.migrate_to)
        self.assertNotIn('releases', self.get_columns())

    def test_reverse_restores_nullable_column(self):
        self.migrate(self.migrate_from)
        apps = MigrationExecutor(connection).loader.project_state(self.migrate_from).apps
        field = apps.get_model('games', 'Game')._meta.get_field('releases')

        self.assertTrue(field.null)
        self.assertEqual(field.get_internal_type(), 'TextField')
        self.assertIn('releases', self.get_columns())
