from graphql_api.helpers.mutation import soft_fail_mutation


@soft_fail_mutation(None)
async def resolve_change_user(_, info, id, dto):
    command = info.context["executor"].get_command("user")
    return await command.update_user(id, **dto)
