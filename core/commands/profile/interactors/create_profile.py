import logging

from django.db import IntegrityError

from core.models import MemberType, Profile, User
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import Conflict, ValidationError
from memberhub.db import sync_to_async

from .forms import YearOfBirthForm

log = logging.getLogger(__name__)


class CreateProfileInteractor(BaseInteractor):
    def validate(self, user_id, member_type_id, year_of_birth):
        form = YearOfBirthForm({"year_of_birth": year_of_birth})
        if not form.is_valid():
            raise ValidationError(form.error_message)

        if not User.objects.filter(pk=user_id).exists():
            raise ValidationError("User not found")
        if not MemberType.objects.filter(pk=member_type_id).exists():
            raise ValidationError("Member type not found")
        if Profile.objects.filter(user_id=user_id).exists():
            raise Conflict("User already has a profile")

    @sync_to_async
    def execute(
        self, is_male: bool, year_of_birth: int, user_id, member_type_id: str
    ) -> Profile:
        self.validate(user_id, member_type_id, year_of_birth)
        try:
            profile = Profile.objects.create(
                is_male=is_male,
                year_of_birth=year_of_birth,
                user_id=user_id,
                member_type_id=member_type_id,
            )
        except IntegrityError:
            raise Conflict("User already has a profile")
        log.info(
            "Created profile",
            extra=dict(profile_id=str(profile.id), user_id=str(user_id)),
        )
        return profile
