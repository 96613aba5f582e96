import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

from .settings_base import *

DEBUG = False
ALLOWED_HOSTS = get_config("setup", "api_allowed_hosts", default=["localhost"])

if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration()],
        environment="PRODUCTION",
        traces_sample_rate=SENTRY_SAMPLE_RATE,
    )
