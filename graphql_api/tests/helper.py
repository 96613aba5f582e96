class GraphQLTestHelper:
    def gql_request(self, query, variables=None, with_errors=False):
        response = self.client.post(
            "/graphql/",
            {"query": query, "variables": variables or {}},
            content_type="application/json",
        )
        return response.json() if with_errors else response.json()["data"]
