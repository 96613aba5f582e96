from core.models import SubscribersOnAuthors

from .loader import BaseLoader


class AuthorsBySubscriberLoader(BaseLoader):
    """
    subscriber id -> users that subscriber follows
    """

    many = True

    @classmethod
    def key(cls, edge):
        return edge.subscriber_id

    @classmethod
    def value(cls, edge):
        return edge.author

    def batch_queryset(self, keys):
        return SubscribersOnAuthors.objects.filter(
            subscriber_id__in=keys
        ).select_related("author")


class SubscribersByAuthorLoader(BaseLoader):
    """
    author id -> users following that author
    """

    many = True

    @classmethod
    def key(cls, edge):
        return edge.author_id

    @classmethod
    def value(cls, edge):
        return edge.subscriber

    def batch_queryset(self, keys):
        return SubscribersOnAuthors.objects.filter(author_id__in=keys).select_related(
            "subscriber"
        )
