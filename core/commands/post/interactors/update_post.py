from core.models import Post
from memberhub.commands.base import BaseInteractor
from memberhub.commands.exceptions import NotFound
from memberhub.db import sync_to_async


class UpdatePostInteractor(BaseInteractor):
    fields = ("title", "content")

    @sync_to_async
    def execute(self, post_id, **changes) -> Post:
        post = Post.objects.filter(pk=post_id).first()
        if not post:
            raise NotFound("Post not found")

        update_fields = []
        for field_name in self.fields:
            value = changes.get(field_name)
            if value is None:
                continue
            setattr(post, field_name, value)
            update_fields.append(field_name)

        if update_fields:
            post.save(update_fields=update_fields)
        return post
