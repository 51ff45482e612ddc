import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from stockmonitor.alerts.constants import AlertStatus
from stockmonitor.alerts.selectors import dashboard_summary
from stockmonitor.alerts.services import (
    current_alerts,
    run_daily_alert_check,
    send_batch_alert,
    send_product_alert,
)
from stockmonitor.core.exceptions import StockMonitorError

from .serializers import AlertSerializer, DashboardSerializer, ProductAlertSerializer

logger = logging.getLogger(__name__)


class SendAlertsView(APIView):
    """
    Trigger an alert email to the requesting user.

    An empty body checks every product (batch alert). A ``newProduct``
    object, or product fields at the top level, checks that one product
    against its own threshold and lead time.
    """

    def post(self, request, *args, **kwargs):
        if not request.user.email:
            raise exceptions.NotAuthenticated("Account has no email address for alerts")

        data = request.data
        payload = data.get("newProduct", data) if isinstance(data, dict) else data
        if not payload:
            result = send_batch_alert(request.user)
        else:
            if not isinstance(payload, dict):
                raise exceptions.ValidationError({"newProduct": ["Expected a product object"]})
            serializer = ProductAlertSerializer(data=payload)
            serializer.is_valid(raise_exception=True)
            result = send_product_alert(request.user, serializer.to_snapshot())

        body = {"status": result.status, "message": result.message}
        if result.composed is not None:
            body["subject"] = result.composed.subject
            body["alerts"] = AlertSerializer(result.composed.alerts, many=True).data
        return Response(body, status=status.HTTP_200_OK)


class AlertSummaryView(APIView):
    """Current alerts for the requesting user; sends nothing"""

    def get(self, request, *args, **kwargs):
        alerts = current_alerts(request.user)
        return Response({"alerts": AlertSerializer(alerts, many=True).data})


class DashboardView(APIView):

    def get(self, request, *args, **kwargs):
        summary = dashboard_summary(request.user)
        summary["daily_alert_check"] = self._daily_alert_check(request.user)
        return Response(DashboardSerializer(summary).data)

    def _daily_alert_check(self, user) -> str:
        """The dashboard still loads when the alert email cannot be sent"""
        if not user.email:
            return AlertStatus.NO_RECIPIENT
        try:
            return run_daily_alert_check(user).status
        except StockMonitorError as e:
            logger.error(f"Daily alert check failed for user {user.pk}: {str(e)}", exc_info=True)
            return e.code
