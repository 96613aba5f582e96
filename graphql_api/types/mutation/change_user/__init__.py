from .change_user import resolve_change_user
