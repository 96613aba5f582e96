import logging

from core.models import User
from memberhub.commands.base import BaseInteractor
from memberhub.db import sync_to_async

log = logging.getLogger(__name__)


class CreateUserInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, name: str, balance: float | None = None) -> User:
        user = User(name=name)
        if balance is not None:
            user.balance = balance
        user.save()
        log.info("Created user", extra=dict(user_id=str(user.id)))
        return user
