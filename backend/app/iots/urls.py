from django.urls import path
from .views import IotView

urlpatterns = [
    path("iots", IotView.as_view()),  # GET/POST /api/iots
    path("iots/", IotView.as_view()),
]
