"""System (console) lookups."""
from games.models import System


def get_systems(console_ids):
    """Return the System rows whose id is in console_ids."""
    return list(System.objects.filter(id__in=set(console_ids)))
