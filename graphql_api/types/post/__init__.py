from .post import post, post_bindable
