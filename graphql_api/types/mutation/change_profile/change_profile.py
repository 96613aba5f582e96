from graphql_api.helpers.mutation import soft_fail_mutation


@soft_fail_mutation(None)
async def resolve_change_profile(_, info, id, dto):
    command = info.context["executor"].get_command("profile")
    return await command.update_profile(id, **dto)
