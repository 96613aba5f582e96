from .change_post import resolve_change_post
