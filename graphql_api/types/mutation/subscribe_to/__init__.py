from .subscribe_to import resolve_subscribe_to
