from .registry import Relation, RequestLoaders


def get_loaders(info) -> RequestLoaders:
    return info.context["loaders"]
