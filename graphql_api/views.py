import json
import logging
import socket
import time
from typing import Any

import regex
from ariadne import format_error, graphql
from ariadne.types import Extension
from django.conf import settings
from django.http import HttpRequest, HttpResponse, HttpResponseNotAllowed, JsonResponse
from django.views import View
from graphql import GraphQLError
from prometheus_client import Counter, Histogram
from sentry_sdk import capture_exception

from memberhub.commands.exceptions import BaseException
from memberhub.commands.executor import get_executor_from_request

from .context import RequestContext
from .dataloader import RequestLoaders
from .schema import schema
from .validation import create_max_aliases_rule, create_max_depth_rule

log = logging.getLogger(__name__)

GQL_HIT_COUNTER = Counter(
    "memberhub_gql_counts_hits",
    "Number of times API GQL endpoint request starts",
    ["operation_type", "operation_name"],
)

GQL_ERROR_COUNTER = Counter(
    "memberhub_gql_counts_errors",
    "Number of times API GQL endpoint failed with an exception",
    ["operation_type", "operation_name"],
)

GQL_REQUEST_LATENCIES = Histogram(
    "memberhub_gql_timers_full_runtime_seconds",
    "Total runtime in seconds of this query",
    ["operation_type", "operation_name"],
    buckets=[0.05, 0.1, 0.25, 0.5, 0.75, 1, 2, 5, 10, 30],
)

GQL_REQUEST_MADE_COUNTER = Counter(
    "memberhub_gql_requests_made",
    "Total API GQL requests made",
    ["path"],
)

GQL_ERROR_TYPE_COUNTER = Counter(
    "memberhub_gql_errors",
    "Number of times API GQL endpoint failed with an exception by type",
    ["error_type", "path"],
)

# covers named operations and unnamed ones selecting a single root field
GQL_TYPE_AND_NAME_PATTERN = r"^(query|mutation|subscription)(?:\(\$input:|) (\w+)(?:\(| \(|{| {|!)|^(?:{) (memberTypes|memberType|posts|post|users|user|profiles|profile)(?:\(| |{)"


class QueryMetricsExtension(Extension):
    """
    We have named and unnamed operations, we want to collect metrics on both.
        named operations have an operation_type and operation_name,
            ex: "query UsersWithPosts { operation body }"
            would be tracked as operation_type = query, operation_name = UsersWithPosts
        unnamed operations are tracked by their root field,
            ex: "{ user(id: "%s") { continued operation body } }"
            this operation would be tracked as operation_type = unknown_type, operation_name = user

    """

    def __init__(self) -> None:
        self.start_timestamp: float = 0
        self.end_timestamp: float = 0
        self.operation_type: str | None = None
        self.operation_name: str | None = None

    def set_type_and_name(self, query: str) -> None:
        operation_type = "unknown_type"
        operation_name = "unknown_name"
        try:
            match_obj = regex.match(GQL_TYPE_AND_NAME_PATTERN, query, timeout=2)
        except TimeoutError:
            # falls back to the default labels, the request itself goes on
            query_slice = query[:30] if len(query) > 30 else query
            log.error("Regex Timeout Error", extra=dict(query_slice=query_slice))
            match_obj = None

        if match_obj:
            if match_obj.group(1) is not None:
                operation_type = match_obj.group(1)

            if match_obj.group(2) is not None:
                operation_name = match_obj.group(2)
            elif match_obj.group(3) is not None:
                operation_name = match_obj.group(3)

        self.operation_type = operation_type
        self.operation_name = operation_name
        if operation_type == "unknown_type" and operation_name == "unknown_name":
            query_slice = query[:30] if len(query) > 30 else query
            log.info(
                "Could not match gql query format for logging",
                extra=dict(query_slice=query_slice),
            )

    def request_started(self, context: dict[str, Any]) -> None:
        """
        Extension hook executed at request's start.
        """
        self.set_type_and_name(query=context["clean_query"])
        self.start_timestamp = time.perf_counter()
        GQL_HIT_COUNTER.labels(
            operation_type=self.operation_type, operation_name=self.operation_name
        ).inc()

    def request_finished(self, context: dict[str, Any]) -> None:
        """
        Extension hook executed at request's end.
        """
        self.end_timestamp = time.perf_counter()
        latency = self.end_timestamp - self.start_timestamp
        GQL_REQUEST_LATENCIES.labels(
            operation_type=self.operation_type, operation_name=self.operation_name
        ).observe(latency)

    def has_errors(self, errors: list[dict[str, Any]], context: dict[str, Any]) -> None:
        """
        Extension hook executed when GraphQL encountered errors.
        """
        GQL_ERROR_COUNTER.labels(
            operation_type=self.operation_type, operation_name=self.operation_name
        ).inc(len(errors))


def error_formatter(error: GraphQLError, debug: bool = False) -> dict[str, Any]:
    # syntax, validation and coercion errors happen before any resolver runs
    # and have no path; they are meant for the client as they are
    original_error = error.original_error
    if original_error is None or error.path is None:
        return format_error(error, debug)

    formatted = format_error(error, debug)
    if isinstance(original_error, BaseException):
        # one of our own command exceptions, we can tell a bit more
        formatted["message"] = original_error.message
        formatted["type"] = type(original_error).__name__
        return formatted

    # otherwise it's not supposed to happen, so we log it
    log.error("GraphQL internal server error", exc_info=original_error)
    capture_exception(original_error)
    if not debug:
        formatted["message"] = "INTERNAL SERVER ERROR"
        formatted["type"] = "ServerError"
    return formatted


class AsyncGraphqlView(View):
    http_method_names = ["get", "post", "options"]

    schema = schema
    extensions = [QueryMetricsExtension]

    def get_validation_rules(self) -> list:
        return [
            create_max_aliases_rule(max_aliases=settings.GRAPHQL_MAX_ALIASES),
            create_max_depth_rule(max_depth=settings.GRAPHQL_MAX_DEPTH),
        ]

    def get_clean_query(self, request_body: dict[str, Any]) -> str | None:
        # clean up graphql query to remove new lines and extra spaces
        if "query" in request_body and isinstance(request_body["query"], str):
            clean_query = request_body["query"].replace("\n", " ")
            clean_query = clean_query.replace("  ", "").strip()
            return clean_query

    def context_value(
        self, request: HttpRequest, request_body: dict[str, Any]
    ) -> RequestContext:
        return {
            "request": request,
            "executor": get_executor_from_request(request),
            # new for every request, cached rows never outlive it
            "loaders": RequestLoaders(),
            "clean_query": self.get_clean_query(request_body) or "",
        }

    async def get(self, *args: Any, **kwargs: Any) -> HttpResponse:
        return HttpResponseNotAllowed(["POST"])

    async def post(
        self, request: HttpRequest, *args: Any, **kwargs: Any
    ) -> HttpResponse:
        req_path = request.get_full_path()
        try:
            req_body = json.loads(request.body.decode("utf-8")) if request.body else {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.warning("Invalid GraphQL request body", extra=dict(error=str(e)))
            GQL_ERROR_TYPE_COUNTER.labels(error_type="bad_request", path=req_path).inc()
            return JsonResponse(
                data={"status": 400, "detail": f"Request body is not valid JSON: {e}"},
                status=400,
            )

        log_body = dict(req_body) if isinstance(req_body, dict) else req_body
        cleaned_query = (
            self.get_clean_query(req_body) if isinstance(req_body, dict) else None
        )
        if cleaned_query:
            log_body["query"] = cleaned_query

        log_data = {
            "server_hostname": socket.gethostname(),
            "request_method": request.method,
            "request_path": req_path,
            "request_body": log_body,
        }
        log.info("GraphQL Request", extra=log_data)
        GQL_REQUEST_MADE_COUNTER.labels(path=req_path).inc()

        _, result = await graphql(
            self.schema,
            req_body,
            context_value=self.context_value(
                request, req_body if isinstance(req_body, dict) else {}
            ),
            validation_rules=self.get_validation_rules(),
            introspection=settings.GRAPHQL_INTROSPECTION_ENABLED,
            error_formatter=error_formatter,
            debug=settings.DEBUG,
            extensions=self.extensions,
        )
        # queries refused before execution come back without a "data" key
        result.setdefault("data", None)

        if "errors" in result:
            GQL_ERROR_TYPE_COUNTER.labels(error_type="all", path=req_path).inc()
        return JsonResponse(result)


BaseAriadneView = AsyncGraphqlView.as_view()


async def ariadne_view(request: HttpRequest) -> HttpResponse:
    return await BaseAriadneView(request)


ariadne_view.csrf_exempt = True
