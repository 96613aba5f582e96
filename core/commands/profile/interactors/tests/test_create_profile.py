import uuid

import pytest
from django.test import TransactionTestCase
from django.utils import timezone

from core.models import Profile
from core.tests.factories import MemberTypeFactory, ProfileFactory, UserFactory
from memberhub.commands.exceptions import Conflict, ValidationError

from ..create_profile import CreateProfileInteractor


class CreateProfileInteractorTest(TransactionTestCase):
    def setUp(self):
        self.user = UserFactory()
        self.other_user = UserFactory()
        self.user_with_profile = ProfileFactory().user
        self.member_type = MemberTypeFactory(id="business")

    def execute(self, **overrides):
        data = dict(
            is_male=True,
            year_of_birth=2000,
            user_id=self.user.id,
            member_type_id=self.member_type.id,
        )
        data.update(overrides)
        return CreateProfileInteractor().execute(**data)

    async def test_create_profile(self):
        profile = await self.execute()
        assert profile.user_id == self.user.id
        assert profile.member_type_id == "business"
        assert profile.year_of_birth == 2000
        assert await Profile.objects.filter(user_id=self.user.id).aexists()

    async def test_year_of_birth_too_old(self):
        with pytest.raises(ValidationError) as err:
            await self.execute(year_of_birth=1899)
        assert err.value.message == (
            f"yearOfBirth must be an integer between 1900 and {timezone.now().year}"
        )

    async def test_year_of_birth_in_the_future(self):
        with pytest.raises(ValidationError):
            await self.execute(year_of_birth=2999)

    async def test_year_of_birth_not_an_integer(self):
        with pytest.raises(ValidationError):
            await self.execute(year_of_birth=123.321)

    async def test_year_of_birth_boolean(self):
        with pytest.raises(ValidationError):
            await self.execute(year_of_birth=True)

    async def test_boundaries_are_inclusive(self):
        profile = await self.execute(year_of_birth=1900)
        assert profile.year_of_birth == 1900

        current_year = timezone.now().year
        other = await self.execute(
            year_of_birth=current_year, user_id=self.other_user.id
        )
        assert other.year_of_birth == current_year

    async def test_unknown_user(self):
        with pytest.raises(ValidationError):
            await self.execute(user_id=uuid.uuid4())

    async def test_unknown_member_type(self):
        with pytest.raises(ValidationError):
            await self.execute(member_type_id="premium")

    async def test_user_already_has_profile(self):
        with pytest.raises(Conflict):
            await self.execute(user_id=self.user_with_profile.id)
        assert (
            await Profile.objects.filter(user_id=self.user_with_profile.id).acount()
            == 1
        )
