import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from django.views.generic import DetailView

from community.services.profile_data_service import build_user_recently_played

logger = logging.getLogger(__name__)


class UserProfileView(DetailView):
    """
    Public user profile page.

    Embeds the recently played panel; ?count= picks how many games it shows,
    clamped to RECENTLY_PLAYED_MAX_COUNT.
    """
    model = get_user_model()
    template_name = 'community/user/profile.html'
    slug_field = 'username'
    slug_url_kwarg = 'username'
    context_object_name = 'target_user'

    def get_queryset(self):
        return super().get_queryset().filter(is_active=True, untracked=False)

    def get_object(self, queryset=None):
        queryset = queryset or self.get_queryset()
        return get_object_or_404(queryset, username__iexact=self.kwargs[self.slug_url_kwarg])

    def get_recently_played_count(self):
        default = settings.RECENTLY_PLAYED_DEFAULT_COUNT
        try:
            count = int(self.request.GET.get('count', default))
        except (TypeError, ValueError):
            return default
        return min(max(count, 1), settings.RECENTLY_PLAYED_MAX_COUNT)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        count = self.get_recently_played_count()

        component = build_user_recently_played(self.object, count)
        context['recently_played_count'] = count
        logger.debug(f"Rendering profile for {self.object.username} with {count} recently played games")
        context['recently_played_panel'] = component.render(request=self.request)
        return context
