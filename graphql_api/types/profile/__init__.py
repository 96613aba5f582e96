from .profile import profile, profile_bindable
