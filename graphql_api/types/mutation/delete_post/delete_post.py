from graphql_api.helpers.mutation import soft_fail_mutation


@soft_fail_mutation(False)
async def resolve_delete_post(_, info, id):
    command = info.context["executor"].get_command("post")
    return await command.delete_post(id)
