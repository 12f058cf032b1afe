import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='System',
            fields=[
                ('id', models.PositiveIntegerField(help_text='Console ID as used by emulators and hash tables.', primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('name_short', models.CharField(blank=True, max_length=20)),
                ('manufacturer', models.CharField(blank=True, max_length=80)),
                ('active', models.BooleanField(default=True)),
            ],
            options={
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Game',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255)),
                ('image_icon', models.CharField(default='/Images/000001.png', max_length=50)),
                ('image_title', models.CharField(blank=True, max_length=50)),
                ('image_ingame', models.CharField(blank=True, max_length=50)),
                ('image_box_art', models.CharField(blank=True, max_length=50)),
                ('publisher', models.CharField(blank=True, max_length=50)),
                ('developer', models.CharField(blank=True, max_length=50)),
                ('genre', models.CharField(blank=True, max_length=50)),
                ('released_at', models.DateField(blank=True, null=True)),
                ('releases', models.TextField(blank=True, null=True)),
                ('achievements_published', models.PositiveIntegerField(default=0)),
                ('points_total', models.PositiveIntegerField(default=0)),
                ('players_total', models.PositiveIntegerField(default=0, help_text='Denormalized count of users that have played the game.')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('system', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='games', to='games.system')),
            ],
            options={
                'db_table': 'GameData',
                'indexes': [models.Index(fields=['system', 'title'], name='game_system_title_idx')],
            },
        ),
        migrations.CreateModel(
            name='Achievement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=64)),
                ('description', models.CharField(blank=True, max_length=255)),
                ('points', models.PositiveIntegerField(default=0)),
                ('badge_name', models.CharField(default='00001', max_length=8)),
                ('order_column', models.IntegerField(default=0)),
                ('is_published', models.BooleanField(default=True)),
                ('game', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='achievements', to='games.game')),
            ],
            options={
                'ordering': ['order_column', 'id'],
                'indexes': [models.Index(fields=['game', 'is_published'], name='achievement_game_pub_idx')],
            },
        ),
        migrations.CreateModel(
            name='PlayerGame',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('achievements_total', models.PositiveIntegerField(default=0)),
                ('achievements_unlocked', models.PositiveIntegerField(default=0)),
                ('achievements_unlocked_hardcore', models.PositiveIntegerField(default=0)),
                ('points_total', models.PositiveIntegerField(blank=True, null=True)),
                ('points', models.PositiveIntegerField(default=0)),
                ('points_hardcore', models.PositiveIntegerField(default=0)),
                ('time_to_beat', models.PositiveIntegerField(blank=True, help_text='Seconds from first play to beating the game (softcore).', null=True)),
                ('time_to_beat_hardcore', models.PositiveIntegerField(blank=True, help_text='Seconds from first play to beating the game (hardcore).', null=True)),
                ('time_to_complete', models.PositiveIntegerField(blank=True, help_text='Seconds from first play to completion (softcore).', null=True)),
                ('time_to_complete_hardcore', models.PositiveIntegerField(blank=True, help_text='Seconds from first play to mastery.', null=True)),
                ('last_played_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('game', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='player_games', to='games.game')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='player_games', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'indexes': [models.Index(fields=['user', 'last_played_at'], name='player_game_recent_idx')],
                'constraints': [models.UniqueConstraint(fields=('user', 'game'), name='player_game_unique')],
            },
        ),
        migrations.CreateModel(
            name='PlayerAchievement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('unlocked_at', models.DateTimeField(blank=True, null=True)),
                ('unlocked_hardcore_at', models.DateTimeField(blank=True, null=True)),
                ('achievement', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='player_achievements', to='games.achievement')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='player_achievements', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'constraints': [models.UniqueConstraint(fields=('user', 'achievement'), name='player_achievement_unique')],
            },
        ),
        migrations.CreateModel(
            name='PlayerBadge',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('award_type', models.PositiveSmallIntegerField(choices=[(1, 'Mastery'), (2, 'Achievement Unlocks Yield'), (3, 'Achievement Points Yield'), (6, 'Patreon Supporter'), (7, 'Certified Legend'), (8, 'Game Beaten')])),
                ('award_data', models.IntegerField(blank=True, null=True)),
                ('award_data_extra', models.PositiveSmallIntegerField(choices=[(0, 'Softcore'), (1, 'Hardcore')], default=0)),
                ('awarded_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('display_order', models.SmallIntegerField(default=0)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='player_badges', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'indexes': [
                    models.Index(fields=['user', 'award_type'], name='player_badge_user_type_idx'),
                    models.Index(fields=['award_data'], name='player_badge_data_idx'),
                ],
            },
        ),
    ]
