from core.models import Profile

from .loader import BaseLoader


class ProfileByUserLoader(BaseLoader):
    @classmethod
    def key(cls, profile):
        return profile.user_id

    def batch_queryset(self, keys):
        return Profile.objects.filter(user_id__in=keys)
