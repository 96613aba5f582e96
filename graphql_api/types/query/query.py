from typing import Any, List, Optional
from uuid import UUID

from ariadne import ObjectType
from graphql import GraphQLResolveInfo
from sentry_sdk import Scope

from core.models import MemberType, Post, Profile, User
from graphql_api.actions.member_types import get_member_type, list_member_types
from graphql_api.actions.posts import get_post, list_posts
from graphql_api.actions.profiles import get_profile, list_profiles
from graphql_api.actions.users import get_user, list_users
from graphql_api.helpers.ariadne import ariadne_load_local_graphql

query = ariadne_load_local_graphql(__file__, "query.graphql")
query_bindable = ObjectType("Query")


def query_name(info: GraphQLResolveInfo) -> Optional[str]:
    if info.operation and info.operation.name:
        return info.operation.name.value


def configure_sentry_scope(query_name: Optional[str]) -> None:
    # names the Sentry transaction after the GraphQL operation so
    # transactions can be filtered per query
    scope = Scope.get_current_scope()
    if scope.transaction:
        scope.transaction.name = f"GraphQL [{query_name}]"


@query_bindable.field("memberTypes")
async def resolve_member_types(_: Any, info: GraphQLResolveInfo) -> List[MemberType]:
    configure_sentry_scope(query_name(info))
    return await list_member_types()


@query_bindable.field("memberType")
async def resolve_member_type(
    _: Any, info: GraphQLResolveInfo, id: str
) -> Optional[MemberType]:
    configure_sentry_scope(query_name(info))
    return await get_member_type(id)


@query_bindable.field("posts")
async def resolve_posts(_: Any, info: GraphQLResolveInfo) -> List[Post]:
    configure_sentry_scope(query_name(info))
    return await list_posts()


@query_bindable.field("post")
async def resolve_post(_: Any, info: GraphQLResolveInfo, id: UUID) -> Optional[Post]:
    configure_sentry_scope(query_name(info))
    return await get_post(id)


@query_bindable.field("users")
async def resolve_users(_: Any, info: GraphQLResolveInfo) -> List[User]:
    configure_sentry_scope(query_name(info))
    return await list_users()


@query_bindable.field("user")
async def resolve_user(_: Any, info: GraphQLResolveInfo, id: UUID) -> Optional[User]:
    configure_sentry_scope(query_name(info))
    return await get_user(id)


@query_bindable.field("profiles")
async def resolve_profiles(_: Any, info: GraphQLResolveInfo) -> List[Profile]:
    configure_sentry_scope(query_name(info))
    return await list_profiles()


@query_bindable.field("profile")
async def resolve_profile(
    _: Any, info: GraphQLResolveInfo, id: UUID
) -> Optional[Profile]:
    configure_sentry_scope(query_name(info))
    return await get_profile(id)
