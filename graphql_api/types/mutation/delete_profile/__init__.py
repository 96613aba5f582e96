from .delete_profile import resolve_delete_profile
