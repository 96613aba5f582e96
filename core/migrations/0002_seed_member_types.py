from django.db import migrations

MEMBER_TYPES = [
    {"id": "basic", "discount": 2.3, "posts_limit_per_month": 20},
    {"id": "business", "discount": 7.7, "posts_limit_per_month": 100},
]


def seed_member_types(apps, schema_editor):
    MemberType = apps.get_model("core", "MemberType")
    for member_type in MEMBER_TYPES:
        MemberType.objects.update_or_create(
            id=member_type["id"],
            defaults={
                "discount": member_type["discount"],
                "posts_limit_per_month": member_type["posts_limit_per_month"],
            },
        )


def remove_member_types(apps, schema_editor):
    MemberType = apps.get_model("core", "MemberType")
    MemberType.objects.filter(id__in=[m["id"] for m in MEMBER_TYPES]).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_member_types, remove_member_types),
    ]
