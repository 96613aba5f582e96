from typing import Generic, TypedDict, TypeVar

from django.http import HttpRequest
from graphql.type.definition import GraphQLResolveInfo

from graphql_api.dataloader.registry import RequestLoaders
from memberhub.commands.executor import Executor

T = TypeVar("T")


class RequestContext(TypedDict):
    """
    The `context_value` built once per GraphQL request by the view.
    `loaders` is new for every request so nothing cached leaks across them.
    """

    request: HttpRequest
    executor: Executor
    loaders: RequestLoaders
    clean_query: str


class TypedResolverInfo(GraphQLResolveInfo, Generic[T]):
    """
    TypedResolverInfo adds type safety to the `context` field of Ariadne's
    GraphQLResolveInfo by letting us declare the expected structure.

    Example usage:

    def resolve_profile(
        user: User, info: TypedResolverInfo[RequestContext]
    ) -> Awaitable[Optional[Profile]]:
        loaders = info.context["loaders"]     # autocompletes the context keys
        return loaders.profile_by_user.load(user.id)
    """

    context: T
