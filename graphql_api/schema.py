from ariadne import make_executable_schema

from .types import bindables, types

# convert_names_case maps camelCase fields, arguments and input fields onto
# snake_case python names, e.g. `yearOfBirth` -> `year_of_birth`.
# See: https://ariadnegraphql.org/docs/api-reference#optional-arguments-10
schema = make_executable_schema(types, *bindables, convert_names_case=True)
