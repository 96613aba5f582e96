from ariadne import EnumType

from .enums import MemberTypeId

# GraphQL values are the raw strings stored in `MemberType.id`
enum_types = [
    EnumType("MemberTypeId", {value: value for value in MemberTypeId.values}),
]
