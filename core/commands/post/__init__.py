from .post import PostCommands
