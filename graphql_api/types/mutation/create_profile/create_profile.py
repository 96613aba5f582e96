async def resolve_create_profile(_, info, dto):
    # year of birth is checked by the interactor, a bad value surfaces as an error
    command = info.context["executor"].get_command("profile")
    return await command.create_profile(
        is_male=dto["is_male"],
        year_of_birth=dto["year_of_birth"],
        user_id=dto["user_id"],
        member_type_id=dto["member_type_id"],
    )
