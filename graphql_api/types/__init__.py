from ..helpers.ariadne import ariadne_load_local_graphql
from .enums import enum_types
from .member_type import member_type, member_type_bindable
from .mutation import mutation, mutation_resolvers
from .post import post, post_bindable
from .profile import profile, profile_bindable
from .query import query, query_bindable
from .scalars import uuid_scalar
from .user import user, user_bindable

inputs = ariadne_load_local_graphql(__file__, "./inputs")
enums = ariadne_load_local_graphql(__file__, "./enums")
scalars = ariadne_load_local_graphql(__file__, "./scalars")
types = [
    enums,
    inputs,
    member_type,
    mutation,
    post,
    profile,
    query,
    scalars,
    user,
]

bindables = [
    *enum_types.enum_types,
    *mutation_resolvers,
    member_type_bindable,
    post_bindable,
    profile_bindable,
    query_bindable,
    user_bindable,
    uuid_scalar,
]
