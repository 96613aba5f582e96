from typing import Awaitable, Optional

from ariadne import ObjectType

from core.models import MemberType, Profile
from graphql_api.context import RequestContext, TypedResolverInfo
from graphql_api.dataloader import get_loaders
from graphql_api.helpers.ariadne import ariadne_load_local_graphql

profile = ariadne_load_local_graphql(__file__, "profile.graphql")

profile_bindable = ObjectType("Profile")


@profile_bindable.field("memberType")
def resolve_member_type(
    profile: Profile, info: TypedResolverInfo[RequestContext]
) -> Awaitable[Optional[MemberType]]:
    return get_loaders(info).member_type.load(profile.member_type_id)
