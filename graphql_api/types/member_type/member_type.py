from ariadne import ObjectType

from graphql_api.helpers.ariadne import ariadne_load_local_graphql

member_type = ariadne_load_local_graphql(__file__, "member_type.graphql")

# every field maps onto a model attribute of the same (snake_case) name
member_type_bindable = ObjectType("MemberType")
