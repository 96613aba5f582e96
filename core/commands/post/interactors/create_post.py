import logging

from core.models import Post, User
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import ValidationError
from memberhub.db import sync_to_async

log = logging.getLogger(__name__)


class CreatePostInteractor(BaseInteractor):
    @sync_to_async
    def execute(self, title: str, content: str, author_id) -> Post:
        if not User.objects.filter(pk=author_id).exists():
            raise ValidationError("Author not found")

        post = Post.objects.create(title=title, content=content, author_id=author_id)
        log.info(
            "Created post", extra=dict(post_id=str(post.id), author_id=str(author_id))
        )
        return post
