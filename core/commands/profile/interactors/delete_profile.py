from core.models import Profile
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import NotFound
from memberhub.db import sync_to_async


class DeleteProfileInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, profile_id) -> bool:
        deleted, _ = Profile.objects.filter(pk=profile_id).delete()
        if not deleted:
            raise NotFound("Profile not found")
        return True
