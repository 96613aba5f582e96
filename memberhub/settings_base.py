import os

from utils.config import SettingsModule, get_config, get_settings_module

SECRET_KEY = get_config("django", "secret_key", default="*")

# Application definition

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "core",
    "graphql_api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "memberhub.urls"

WSGI_APPLICATION = "memberhub.wsgi.application"
ASGI_APPLICATION = "memberhub.asgi.application"

# GraphQL

GRAPHQL_INTROSPECTION_ENABLED = False

GRAPHQL_MAX_DEPTH = get_config("setup", "graphql", "max_depth", default=5)

GRAPHQL_MAX_ALIASES = get_config("setup", "graphql", "max_aliases", default=15)

# update/delete/subscription mutations return null/false instead of raising
# when the targeted rows are missing or a constraint is violated
GRAPHQL_SOFT_FAIL_MUTATIONS = get_config(
    "setup", "graphql", "soft_fail_mutations", default=True
)

# Database
# https://docs.djangoproject.com/en/5.0/ref/settings/#databases

DATABASES = {
    "default": {
        "ENGINE": get_config(
            "services", "database", "engine", default="django.db.backends.postgresql"
        ),
        "NAME": get_config("services", "database", "name", default="memberhub"),
        "USER": get_config("services", "database", "username", default="postgres"),
        "PASSWORD": get_config("services", "database", "password", default="postgres"),
        "HOST": get_config("services", "database", "host", default="postgres"),
        "PORT": get_config("services", "database", "port", default=5432),
        "CONN_MAX_AGE": get_config("services", "database", "conn_max_age", default=0),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Internationalization

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = False

USE_TZ = True

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

SERVICE_NAME = get_config("setup", "service_name", default="memberhub-api")

LOG_FORMAT = "%(message)s %(asctime)s %(name)s %(levelname)s %(lineno)s %(pathname)s %(funcName)s %(threadName)s"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "()": "utils.logging_configuration.CustomLocalJsonFormatter",
            "fmt": LOG_FORMAT,
            "service": SERVICE_NAME,
        },
        "json": {
            "()": "utils.logging_configuration.CustomJsonFormatter",
            "fmt": LOG_FORMAT,
            "service": SERVICE_NAME,
        },
    },
    "root": {"handlers": ["default"], "level": "INFO", "propagate": True},
    "handlers": {
        "default": {
            "level": "INFO",
            "formatter": (
                "standard"
                if get_settings_module() == SettingsModule.DEV.value
                else "json"
            ),
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",  # Default is stderr
        },
    },
}

SENTRY_DSN = get_config("services", "sentry", "server_dsn", default=None)
SENTRY_SAMPLE_RATE = float(get_config("services", "sentry", "sample_rate", default=0.1))
