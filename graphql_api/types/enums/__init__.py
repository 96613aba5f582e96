from .enums import MemberTypeId
