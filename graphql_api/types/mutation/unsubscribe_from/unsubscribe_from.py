from graphql_api.helpers.mutation import soft_fail_mutation


@soft_fail_mutation(False)
async def resolve_unsubscribe_from(_, info, user_id, author_id):
    command = info.context["executor"].get_command("user")
    return await command.unsubscribe_from(user_id, author_id)
