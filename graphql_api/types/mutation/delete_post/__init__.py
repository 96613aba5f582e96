from .delete_post import resolve_delete_post
