from django.core.management.base import BaseCommand, CommandParser
from graphql import print_schema

from graphql_api.schema import schema


class Command(BaseCommand):
    help = "Dump the full GraphQL schema to a file"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--output",
            default="graphql_api/schema.graphql",
            help="Path of the file the SDL is written to",
        )

    def handle(self, *args, **options) -> None:
        content = print_schema(schema)
        with open(options["output"], "w") as f:
            f.write(content)
        self.stdout.write(f"Schema written to {options['output']}")
