from core.models import MemberType
from memberhub.db import sync_to_async


@sync_to_async
def list_member_types():
    return list(MemberType.objects.order_by("posts_limit_per_month"))


@sync_to_async
def get_member_type(member_type_id):
    return MemberType.objects.filter(pk=member_type_id).first()
