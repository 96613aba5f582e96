import uuid

import pytest
from django.test import TransactionTestCase

from core.models import User
from core.tests.factories import UserFactory
from memberhub.commands.exceptions import NotFound

from ..delete_user import DeleteUserInteractor


class DeleteUserInteractorTest(TransactionTestCase):
    def setUp(self):
        self.user = UserFactory()

    async def test_delete_user(self):
        assert await DeleteUserInteractor().execute(self.user.id) is True
        assert not await User.objects.filter(pk=self.user.id).aexists()

    async def test_delete_missing_user(self):
        with pytest.raises(NotFound):
            await DeleteUserInteractor().execute(uuid.uuid4())
