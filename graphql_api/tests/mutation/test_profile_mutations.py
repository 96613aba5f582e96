import uuid

from django.test import TransactionTestCase, override_settings
from django.utils import timezone

from core.models import Profile
from core.tests.factories import MemberTypeFactory, ProfileFactory, UserFactory
from graphql_api.tests.helper import GraphQLTestHelper

create_query = """
    mutation($dto: CreateProfileInput!) {
        createProfile(dto: $dto) { id isMale yearOfBirth userId memberTypeId memberType { discount } }
    }
"""

change_query = """
    mutation($id: UUID!, $dto: ChangeProfileInput!) {
        changeProfile(id: $id, dto: $dto) { id isMale yearOfBirth memberTypeId }
    }
"""

delete_query = """
    mutation($id: UUID!) {
        deleteProfile(id: $id)
    }
"""


class ProfileMutationsTest(GraphQLTestHelper, TransactionTestCase):
    def setUp(self):
        MemberTypeFactory(id="basic")
        MemberTypeFactory(id="business")
        self.user = UserFactory()

    def create(self, **overrides):
        dto = {
            "isMale": True,
            "yearOfBirth": 2000,
            "userId": str(self.user.id),
            "memberTypeId": "business",
        }
        dto.update(overrides)
        return self.gql_request(create_query, variables={"dto": dto}, with_errors=True)

    def test_create_profile(self):
        response = self.create()
        assert "errors" not in response
        created = response["data"]["createProfile"]
        assert created["isMale"] is True
        assert created["yearOfBirth"] == 2000
        assert created["userId"] == str(self.user.id)
        assert created["memberTypeId"] == "business"
        assert created["memberType"] == {"discount": 7.7}
        assert Profile.objects.filter(user=self.user).exists()

    def test_create_profile_current_year(self):
        response = self.create(yearOfBirth=timezone.now().year)
        assert response["data"]["createProfile"]["yearOfBirth"] == timezone.now().year

    def test_create_profile_year_too_old(self):
        response = self.create(yearOfBirth=1899)
        assert response["data"] == {"createProfile": None}
        assert response["errors"][0]["type"] == "ValidationError"
        assert response["errors"][0]["message"] == (
            f"yearOfBirth must be an integer between 1900 and {timezone.now().year}"
        )
        assert not Profile.objects.exists()

    def test_create_profile_year_in_the_future(self):
        response = self.create(yearOfBirth=2999)
        assert response["data"] == {"createProfile": None}
        assert response["errors"][0]["type"] == "ValidationError"
        assert not Profile.objects.exists()

    def test_create_profile_year_not_an_integer(self):
        # refused while coercing variables, before any resolver runs
        response = self.create(yearOfBirth=123.321)
        assert response["data"] is None
        assert response["errors"]
        assert not Profile.objects.exists()

    def test_create_profile_year_not_an_integer_literal(self):
        query = """
            mutation($userId: UUID!) {
                createProfile(dto: {isMale: true, yearOfBirth: 123.321, userId: $userId, memberTypeId: basic}) { id }
            }
        """
        response = self.gql_request(
            query, variables={"userId": str(self.user.id)}, with_errors=True
        )
        assert response["data"] is None
        assert response["errors"]
        assert not Profile.objects.exists()

    def test_create_profile_twice(self):
        self.create()
        response = self.create()
        assert response["data"] == {"createProfile": None}
        assert response["errors"][0]["message"] == "User already has a profile"
        assert Profile.objects.count() == 1

    def test_change_profile(self):
        profile = ProfileFactory(
            user=self.user, member_type=MemberTypeFactory(id="basic"), is_male=True
        )
        data = self.gql_request(
            change_query,
            variables={
                "id": str(profile.id),
                "dto": {"memberTypeId": "business", "yearOfBirth": 1980},
            },
        )
        assert data["changeProfile"] == {
            "id": str(profile.id),
            "isMale": True,
            "yearOfBirth": 1980,
            "memberTypeId": "business",
        }

    def test_change_profile_invalid_year_is_an_error(self):
        profile = ProfileFactory(user=self.user, year_of_birth=1990)
        response = self.gql_request(
            change_query,
            variables={"id": str(profile.id), "dto": {"yearOfBirth": 1800}},
            with_errors=True,
        )
        assert response["data"] == {"changeProfile": None}
        assert response["errors"][0]["type"] == "ValidationError"
        profile.refresh_from_db()
        assert profile.year_of_birth == 1990

    def test_change_profile_not_found_is_null(self):
        response = self.gql_request(
            change_query,
            variables={"id": str(uuid.uuid4()), "dto": {"isMale": False}},
            with_errors=True,
        )
        assert response == {"data": {"changeProfile": None}}

    @override_settings(GRAPHQL_SOFT_FAIL_MUTATIONS=False)
    def test_change_profile_not_found_without_soft_fail(self):
        response = self.gql_request(
            change_query,
            variables={"id": str(uuid.uuid4()), "dto": {"isMale": False}},
            with_errors=True,
        )
        assert response["errors"][0]["message"] == "Profile not found"

    def test_delete_profile(self):
        profile = ProfileFactory(user=self.user)
        assert self.gql_request(delete_query, variables={"id": str(profile.id)}) == {
            "deleteProfile": True
        }
        assert self.gql_request(delete_query, variables={"id": str(profile.id)}) == {
            "deleteProfile": False
        }
