from .user import user, user_bindable
