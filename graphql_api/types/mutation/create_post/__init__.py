from .create_post import resolve_create_post
