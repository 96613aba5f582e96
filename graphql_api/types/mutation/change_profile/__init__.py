from .change_profile import resolve_change_profile
