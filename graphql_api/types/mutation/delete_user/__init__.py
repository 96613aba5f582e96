from .delete_user import resolve_delete_user
