import uuid

from django.db import models


class MemberTypeId(models.TextChoices):
    BASIC = "basic"
    BUSINESS = "business"


class MemberType(models.Model):
    """
    Static reference data: one row per membership tier.
    """

    id = models.CharField(primary_key=True, max_length=32, choices=MemberTypeId.choices)
    discount = models.FloatField()
    posts_limit_per_month = models.IntegerField()

    class Meta:
        db_table = "member_types"

    def __str__(self):
        return self.id


class User(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.TextField()
    balance = models.FloatField(default=0)

    class Meta:
        db_table = "users"

    def __str__(self):
        return f"User<{self.name}>"


class Profile(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    is_male = models.BooleanField()
    year_of_birth = models.IntegerField()
    # one profile per user
    user = models.OneToOneField(
        User, on_delete=models.CASCADE, related_name="profile"
    )
    member_type = models.ForeignKey(
        MemberType, on_delete=models.PROTECT, related_name="profiles"
    )

    class Meta:
        db_table = "profiles"


class Post(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    content = models.TextField()
    author = models.ForeignKey(User, on_delete=models.CASCADE, related_name="posts")

    class Meta:
        db_table = "posts"


class SubscribersOnAuthors(models.Model):
    """
    Edge of the self-referential many-to-many relation on `User`:
    `subscriber` follows `author`.
    """

    subscriber = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="user_subscribed_to"
    )
    author = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name="subscribed_to_user"
    )

    class Meta:
        db_table = "subscribers_on_authors"
        constraints = [
            models.UniqueConstraint(
                fields=["subscriber", "author"], name="unique_subscriber_author"
            )
        ]
