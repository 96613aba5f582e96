async def resolve_create_user(_, info, dto):
    command = info.context["executor"].get_command("user")
    return await command.create_user(**dto)
