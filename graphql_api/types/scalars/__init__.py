from .uuid_scalar import uuid_scalar

__all__ = ["uuid_scalar"]
