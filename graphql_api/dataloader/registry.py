import enum
from functools import cached_property

from .loader import BaseLoader
from .member_type import MemberTypeLoader
from .post import PostsByAuthorLoader
from .profile import ProfileByUserLoader
from .subscription import AuthorsBySubscriberLoader, SubscribersByAuthorLoader


class Relation(enum.Enum):
    PROFILE_BY_USER = "profile_by_user"
    POSTS_BY_AUTHOR = "posts_by_author"
    MEMBER_TYPE = "member_type"
    AUTHORS_BY_SUBSCRIBER = "authors_by_subscriber"
    SUBSCRIBERS_BY_AUTHOR = "subscribers_by_author"


class RequestLoaders:
    """
    The loaders of a single GraphQL request.

    A fresh instance is put in the resolver context for every request and
    dropped with it, so cached results never outlive the request that
    fetched them. Each loader is created on first access.

    Resolvers that know their relation statically use the typed attributes.
    `get` looks a loader up by `Relation`. The subscription resolvers go
    through it to name which direction of the edge they load.
    """

    @cached_property
    def profile_by_user(self) -> ProfileByUserLoader:
        return ProfileByUserLoader()

    @cached_property
    def posts_by_author(self) -> PostsByAuthorLoader:
        return PostsByAuthorLoader()

    @cached_property
    def member_type(self) -> MemberTypeLoader:
        return MemberTypeLoader()

    @cached_property
    def authors_by_subscriber(self) -> AuthorsBySubscriberLoader:
        return AuthorsBySubscriberLoader()

    @cached_property
    def subscribers_by_author(self) -> SubscribersByAuthorLoader:
        return SubscribersByAuthorLoader()

    def get(self, relation: Relation) -> BaseLoader:
        return getattr(self, relation.value)
