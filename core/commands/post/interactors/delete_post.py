from core.models import Post
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import NotFound
from memberhub.db import sync_to_async


class DeletePostInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, post_id) -> bool:
        deleted, _ = Post.objects.filter(pk=post_id).delete()
        if not deleted:
            raise NotFound("Post not found")
        return True
