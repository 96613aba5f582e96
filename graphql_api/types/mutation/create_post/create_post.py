async def resolve_create_post(_, info, dto):
    command = info.context["executor"].get_command("post")
    return await command.create_post(
        title=dto["title"], content=dto["content"], author_id=dto["author_id"]
    )
