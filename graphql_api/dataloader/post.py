from core.models import Post

from .loader import BaseLoader


class PostsByAuthorLoader(BaseLoader):
    many = True

    @classmethod
    def key(cls, post):
        return post.author_id

    def batch_queryset(self, keys):
        return Post.objects.filter(author_id__in=keys)
