from core.models import SubscribersOnAuthors
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import NotFound
from memberhub.db import sync_to_async


class UnsubscribeFromInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, user_id, author_id) -> bool:
        deleted, _ = SubscribersOnAuthors.objects.filter(
            subscriber_id=user_id, author_id=author_id
        ).delete()
        if not deleted:
            raise NotFound("Subscription not found")
        return True
