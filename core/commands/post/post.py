from memberhub.commands.base import BaseCommand

from .interactors.create_post import CreatePostInteractor
from .interactors.delete_post import DeletePostInteractor
from .interactors.update_post import UpdatePostInteractor


class PostCommands(BaseCommand):
    def create_post(self, **kwargs):
        return self.get_interactor(CreatePostInteractor).execute(**kwargs)

    def update_post(self, post_id, **kwargs):
        return self.get_interactor(UpdatePostInteractor).execute(post_id, **kwargs)

    def delete_post(self, post_id):
        return self.get_interactor(DeletePostInteractor).execute(post_id)
