from memberhub.commands.base import BaseCommand

from .interactors.create_profile import CreateProfileInteractor
from .interactors.delete_profile import DeleteProfileInteractor
from .interactors.update_profile import UpdateProfileInteractor


class ProfileCommands(BaseCommand):
    def create_profile(self, **kwargs):
        return self.get_interactor(CreateProfileInteractor).execute(**kwargs)

    def update_profile(self, profile_id, **kwargs):
        return self.get_interactor(UpdateProfileInteractor).execute(
            profile_id, **kwargs
        )

    def delete_profile(self, profile_id):
        return self.get_interactor(DeleteProfileInteractor).execute(profile_id)
