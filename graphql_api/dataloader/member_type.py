from core.models import MemberType

from .loader import BaseLoader


class MemberTypeLoader(BaseLoader):
    def batch_queryset(self, keys):
        return MemberType.objects.filter(id__in=keys)
