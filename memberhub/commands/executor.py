from core.commands.post import PostCommands
from core.commands.profile import ProfileCommands
from core.commands.user import UserCommands

mapping = {
    "user": UserCommands,
    "profile": ProfileCommands,
    "post": PostCommands,
}


class Executor:
    def get_command(self, namespace):
        KlassCommand = mapping[namespace]
        return KlassCommand()


def get_executor_from_request(request):
    return Executor()
