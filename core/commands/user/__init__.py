from .user import UserCommands
