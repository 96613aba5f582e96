from django.urls import include, path

from memberhub import views

urlpatterns = [
    path("health/", views.health),
    path("", views.health),
    path("graphql/", include("graphql_api.urls")),
    path("monitoring/metrics", views.metrics),
]
