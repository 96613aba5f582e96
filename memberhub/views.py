from django.db import connection
from django.http import HttpResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest


def health(request):
    # will raise if connection cannot be established
    connection.ensure_connection()
    return HttpResponse("memberhub is live!")


def metrics(request):
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
