from core.models import MemberType, Profile
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import NotFound, ValidationError
from memberhub.db import sync_to_async

from .forms import YearOfBirthForm


class UpdateProfileInteractor(BaseInteractor):
    fields = ("is_male", "year_of_birth", "member_type_id")

    def validate(self, **changes):
        if changes.get("year_of_birth") is not None:
            form = YearOfBirthForm(
                {"year_of_birth": changes["year_of_birth"]}, required=False
            )
            if not form.is_valid():
                raise ValidationError(form.error_message)

        member_type_id = changes.get("member_type_id")
        if (
            member_type_id is not None
            and not MemberType.objects.filter(pk=member_type_id).exists()
        ):
            raise ValidationError("Member type not found")

    @sync_to_async
    def execute(self, profile_id, **changes) -> Profile:
        self.validate(**changes)

        profile = Profile.objects.filter(pk=profile_id).first()
        if not profile:
            raise NotFound("Profile not found")

        update_fields = []
        for field_name in self.fields:
            value = changes.get(field_name)
            if value is None:
                continue
            setattr(profile, field_name, value)
            update_fields.append(field_name)

        if update_fields:
            profile.save(update_fields=update_fields)
        return profile
