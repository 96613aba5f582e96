from core.models import MemberTypeId

__all__ = ["MemberTypeId"]
