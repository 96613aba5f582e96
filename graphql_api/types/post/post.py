from ariadne import ObjectType

from graphql_api.helpers.ariadne import ariadne_load_local_graphql

post = ariadne_load_local_graphql(__file__, "post.graphql")

post_bindable = ObjectType("Post")
