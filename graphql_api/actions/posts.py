from core.models import Post
from memberhub.db import sync_to_async


@sync_to_async
def list_posts():
    return list(Post.objects.all())


@sync_to_async
def get_post(post_id):
    return Post.objects.filter(pk=post_id).first()
