from rest_framework import mixins, status, viewsets
from rest_framework.response import Response

from stockmonitor.sales.constants import SaleDefaults
from stockmonitor.sales.selectors import list_recent_sales
from stockmonitor.sales.services import record_sale

from .serializers import RecentSalesQuerySerializer, RecordSaleSerializer, SaleSerializer


class SaleViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """Recent sales (``?limit=N``, default 10) and sale entry"""
    serializer_class = SaleSerializer

    def get_queryset(self, *args, **kwargs):
        query = RecentSalesQuerySerializer(data=self.request.query_params)
        query.is_valid(raise_exception=True)
        limit = query.validated_data.get("limit", SaleDefaults.RECENT_SALES_LIMIT)
        return list_recent_sales(self.request.user, limit=limit)

    def create(self, request, *args, **kwargs):
        payload = RecordSaleSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        sale = record_sale(
            user=request.user,
            product_id=payload.validated_data["product_id"],
            quantity=payload.validated_data["quantity"],
        )
        return Response(SaleSerializer(sale).data, status=status.HTTP_201_CREATED)
