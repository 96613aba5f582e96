from django.urls import re_path

from .views import ariadne_view

urlpatterns = [
    re_path(r"^$", ariadne_view, name="graphql"),
]
