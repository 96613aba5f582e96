from core.models import User
from memberhub.db import sync_to_async


@sync_to_async
def list_users():
    return list(User.objects.all())


@sync_to_async
def get_user(user_id):
    return User.objects.filter(pk=user_id).first()
