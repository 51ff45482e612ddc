from django.conf import settings
from django.urls import path
from rest_framework.routers import DefaultRouter, SimpleRouter

from stockmonitor.alerts.api.views import AlertSummaryView, DashboardView, SendAlertsView
from stockmonitor.products.api.views import ProductViewSet
from stockmonitor.sales.api.views import SaleViewSet

router = DefaultRouter() if settings.DEBUG else SimpleRouter()

router.register("products", ProductViewSet, basename="product")
router.register("sales", SaleViewSet, basename="sale")

app_name = "api"
urlpatterns = [
    path("alerts/", AlertSummaryView.as_view(), name="alert-summary"),
    path("alerts/send/", SendAlertsView.as_view(), name="alert-send"),
    path("dashboard/", DashboardView.as_view(), name="dashboard"),
    *router.urls,
]
