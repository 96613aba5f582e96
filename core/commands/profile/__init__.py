from .profile import ProfileCommands
