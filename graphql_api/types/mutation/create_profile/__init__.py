from .create_profile import resolve_create_profile
