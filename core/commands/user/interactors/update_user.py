from core.models import User
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import NotFound
from memberhub.db import sync_to_async


class UpdateUserInteractor(BaseInteractor):
    fields = ("name", "balance")

    @sync_to_async
    def execute(self, user_id, **changes) -> User:
        user = User.objects.filter(pk=user_id).first()
        if not user:
            raise NotFound("User not found")

        update_fields = []
        for field_name in self.fields:
            value = changes.get(field_name)
            if value is None:
                continue
            setattr(user, field_name, value)
            update_fields.append(field_name)

        if update_fields:
            user.save(update_fields=update_fields)
        return user
