from .create_user import resolve_create_user
