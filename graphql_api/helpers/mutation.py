import logging

from django.conf import settings
from django.db import DatabaseError

from memberhub.commands import exceptions

log = logging.getLogger(__name__)

# errors a mutation turns into its fallback value; `ValidationError` is left
# to surface as a GraphQL error so the caller sees why the input was refused
SOFT_FAILURES = (exceptions.NotFound, exceptions.Conflict, DatabaseError)


def soft_fail_mutation(fallback):
    """
    Resolve to `fallback` (`None` or `False`) instead of raising when the
    mutation cannot be applied, logging the failure. Disabled through the
    GRAPHQL_SOFT_FAIL_MUTATIONS setting, in which case errors propagate.
    """

    def decorator(resolver):
        async def resolver_with_soft_fail(parent, info, *args, **kwargs):
            try:
                return await resolver(parent, info, *args, **kwargs)
            except SOFT_FAILURES as e:
                if not settings.GRAPHQL_SOFT_FAIL_MUTATIONS:
                    raise
                log.warning(
                    "Mutation failed",
                    extra=dict(
                        mutation=info.field_name,
                        arguments=kwargs,
                        error=str(e),
                    ),
                )
                return fallback

        return resolver_with_soft_fail

    return decorator
