import uuid

from django.test import TransactionTestCase

from core.models import Post
from core.tests.factories import PostFactory, UserFactory
from graphql_api.tests.helper import GraphQLTestHelper

create_query = """
    mutation($dto: CreatePostInput!) {
        createPost(dto: $dto) { id title content authorId }
    }
"""

change_query = """
    mutation($id: UUID!, $dto: ChangePostInput!) {
        changePost(id: $id, dto: $dto) { id title content }
    }
"""

delete_query = """
    mutation($id: UUID!) {
        deletePost(id: $id)
    }
"""


class PostMutationsTest(GraphQLTestHelper, TransactionTestCase):
    def setUp(self):
        self.author = UserFactory()
        self.post = PostFactory(author=self.author, title="Draft", content="Body")

    def test_create_post(self):
        data = self.gql_request(
            create_query,
            variables={
                "dto": {
                    "title": "Hello",
                    "content": "World",
                    "authorId": str(self.author.id),
                }
            },
        )
        created = data["createPost"]
        assert created["title"] == "Hello"
        assert created["content"] == "World"
        assert created["authorId"] == str(self.author.id)
        assert Post.objects.filter(pk=created["id"]).exists()

    def test_create_post_unknown_author(self):
        response = self.gql_request(
            create_query,
            variables={
                "dto": {"title": "Hello", "content": "World", "authorId": str(uuid.uuid4())}
            },
            with_errors=True,
        )
        assert response["data"] == {"createPost": None}
        assert response["errors"][0]["message"] == "Author not found"
        assert response["errors"][0]["type"] == "ValidationError"
        assert Post.objects.count() == 1

    def test_change_post_only_given_fields(self):
        data = self.gql_request(
            change_query,
            variables={"id": str(self.post.id), "dto": {"title": "Final"}},
        )
        assert data["changePost"] == {
            "id": str(self.post.id),
            "title": "Final",
            "content": "Body",
        }

    def test_change_post_not_found_is_null(self):
        response = self.gql_request(
            change_query,
            variables={"id": str(uuid.uuid4()), "dto": {"title": "Final"}},
            with_errors=True,
        )
        assert response == {"data": {"changePost": None}}

    def test_delete_post(self):
        data = self.gql_request(delete_query, variables={"id": str(self.post.id)})
        assert data == {"deletePost": True}
        assert not Post.objects.exists()

    def test_delete_post_twice(self):
        self.gql_request(delete_query, variables={"id": str(self.post.id)})
        data = self.gql_request(delete_query, variables={"id": str(self.post.id)})
        assert data == {"deletePost": False}
