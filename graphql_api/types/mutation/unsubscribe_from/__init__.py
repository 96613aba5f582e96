from .unsubscribe_from import resolve_unsubscribe_from
