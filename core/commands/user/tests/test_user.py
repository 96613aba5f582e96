from unittest.mock import patch

from django.test import TransactionTestCase

from ..user import UserCommands


class UserCommandsTest(TransactionTestCase):
    def setUp(self):
        self.command = UserCommands()

    @patch("core.commands.user.user.CreateUserInteractor.execute")
    async def test_create_user_delegate_to_interactor(self, interactor_mock):
        await self.command.create_user(name="Alice", balance=1.0)
        interactor_mock.assert_called_once_with(name="Alice", balance=1.0)

    @patch("core.commands.user.user.UpdateUserInteractor.execute")
    async def test_update_user_delegate_to_interactor(self, interactor_mock):
        await self.command.update_user("user-id", name="Bob")
        interactor_mock.assert_called_once_with("user-id", name="Bob")

    @patch("core.commands.user.user.DeleteUserInteractor.execute")
    async def test_delete_user_delegate_to_interactor(self, interactor_mock):
        await self.command.delete_user("user-id")
        interactor_mock.assert_called_once_with("user-id")

    @patch("core.commands.user.user.SubscribeToInteractor.execute")
    async def test_subscribe_to_delegate_to_interactor(self, interactor_mock):
        await self.command.subscribe_to("user-id", "author-id")
        interactor_mock.assert_called_once_with("user-id", "author-id")

    @patch("core.commands.user.user.UnsubscribeFromInteractor.execute")
    async def test_unsubscribe_from_delegate_to_interactor(self, interactor_mock):
        await self.command.unsubscribe_from("user-id", "author-id")
        interactor_mock.assert_called_once_with("user-id", "author-id")
