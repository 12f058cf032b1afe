"""Drop the unused GameData.releases column. Reversing re-adds it as nullable text."""

from django.db import migrations


class Migration(migrations.Migration):

    dependencies = [
        ('games', '0001_initial'),
    ]

    operations = [
        migrations.RemoveField(
            model_name='game',
            name='releases',
        ),
    ]
