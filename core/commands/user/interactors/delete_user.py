import logging

from core.models import User
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import NotFound
from memberhub.db import sync_to_async

log = logging.getLogger(__name__)


class DeleteUserInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, user_id) -> bool:
        # profile, posts and subscription edges go with the user (cascade)
        deleted, _ = User.objects.filter(pk=user_id).delete()
        if not deleted:
            raise NotFound("User not found")
        log.info("Deleted user", extra=dict(user_id=str(user_id)))
        return True
