from graphql_api.helpers.mutation import soft_fail_mutation


@soft_fail_mutation(None)
async def resolve_subscribe_to(_, info, user_id, author_id):
    command = info.context["executor"].get_command("user")
    return await command.subscribe_to(user_id, author_id)
