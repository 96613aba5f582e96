from typing import Awaitable, List, Optional

from ariadne import ObjectType

from core.models import Post, Profile, User
from graphql_api.context import RequestContext, TypedResolverInfo
from graphql_api.dataloader import Relation, get_loaders
from graphql_api.helpers.ariadne import ariadne_load_local_graphql

user = ariadne_load_local_graphql(__file__, "user.graphql")

user_bindable = ObjectType("User")


@user_bindable.field("profile")
def resolve_profile(
    user: User, info: TypedResolverInfo[RequestContext]
) -> Awaitable[Optional[Profile]]:
    return get_loaders(info).profile_by_user.load(user.id)


@user_bindable.field("posts")
def resolve_posts(
    user: User, info: TypedResolverInfo[RequestContext]
) -> Awaitable[List[Post]]:
    return get_loaders(info).posts_by_author.load(user.id)


# users this user is subscribed to
@user_bindable.field("userSubscribedTo")
def resolve_user_subscribed_to(
    user: User, info: TypedResolverInfo[RequestContext]
) -> Awaitable[List[User]]:
    return get_loaders(info).get(Relation.AUTHORS_BY_SUBSCRIBER).load(user.id)


# users subscribed to this user
@user_bindable.field("subscribedToUser")
def resolve_subscribed_to_user(
    user: User, info: TypedResolverInfo[RequestContext]
) -> Awaitable[List[User]]:
    return get_loaders(info).get(Relation.SUBSCRIBERS_BY_AUTHOR).load(user.id)
