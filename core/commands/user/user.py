from memberhub.commands.base import BaseCommand

from .interactors.create_user import CreateUserInteractor
from .interactors.delete_user import DeleteUserInteractor
from .interactors.subscribe_to import SubscribeToInteractor
from .interactors.unsubscribe_from import UnsubscribeFromInteractor
from .interactors.update_user import UpdateUserInteractor


class UserCommands(BaseCommand):
    def create_user(self, **kwargs):
        return self.get_interactor(CreateUserInteractor).execute(**kwargs)

    def update_user(self, user_id, **kwargs):
        return self.get_interactor(UpdateUserInteractor).execute(user_id, **kwargs)

    def delete_user(self, user_id):
        return self.get_interactor(DeleteUserInteractor).execute(user_id)

    def subscribe_to(self, user_id, author_id):
        return self.get_interactor(SubscribeToInteractor).execute(user_id, author_id)

    def unsubscribe_from(self, user_id, author_id):
        return self.get_interactor(UnsubscribeFromInteractor).execute(
            user_id, author_id
        )
