from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from stockmonitor.products.selectors import list_in_stock_products, list_products
from stockmonitor.products.services import delete_product

from .serializers import ProductSerializer, StockOptionSerializer


class ProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    lookup_field = "pk"

    def get_queryset(self, *args, **kwargs):
        return list_products(self.request.user)

    def perform_destroy(self, instance):
        delete_product(owner=self.request.user, product_id=instance.pk)

    @action(detail=False, url_path="in-stock")
    def in_stock(self, request):
        serializer = StockOptionSerializer(list_in_stock_products(request.user), many=True)
        return Response(serializer.data)
