from django.db import IntegrityError

from core.models import SubscribersOnAuthors, User
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import Conflict, NotFound
from memberhub.db import sync_to_async


class SubscribeToInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, user_id, author_id) -> User:
        """
        Make `user_id` a subscriber of `author_id` and return the subscriber.
        """
        subscriber = User.objects.filter(pk=user_id).first()
        if not subscriber:
            raise NotFound("User not found")
        if not User.objects.filter(pk=author_id).exists():
            raise NotFound("Author not found")

        edge = SubscribersOnAuthors.objects.filter(
            subscriber_id=user_id, author_id=author_id
        )
        if edge.exists():
            raise Conflict("User is already subscribed to this author")

        try:
            SubscribersOnAuthors.objects.create(
                subscriber_id=user_id, author_id=author_id
            )
        except IntegrityError:
            raise Conflict("User is already subscribed to this author")
        return subscriber
