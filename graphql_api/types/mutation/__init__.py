from graphql_api.helpers.ariadne import ariadne_load_local_graphql

from .mutation import mutation_resolvers  # noqa: F401

mutation = ariadne_load_local_graphql(__file__, "mutation.graphql")
