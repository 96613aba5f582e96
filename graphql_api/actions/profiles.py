from core.models import Profile
from memberhub.db import sync_to_async


@sync_to_async
def list_profiles():
    return list(Profile.objects.all())


@sync_to_async
def get_profile(profile_id):
    return Profile.objects.filter(pk=profile_id).first()
