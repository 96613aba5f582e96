from .settings_base import *

DEBUG = True
ALLOWED_HOSTS = get_config(
    "setup", "api_allowed_hosts", default=["localhost", "127.0.0.1"]
)

DATABASES["default"]["HOST"] = get_config(
    "services", "database", "host", default="localhost"
)

GRAPHQL_INTROSPECTION_ENABLED = True
