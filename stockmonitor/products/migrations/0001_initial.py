import uuid

import django.db.models.deletion
import djmoney.models.fields
import djmoney.models.validators
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("name", models.CharField(db_index=True, max_length=255, verbose_name="Name")),
                ("category", models.CharField(blank=True, max_length=100, verbose_name="Category")),
                ("price_currency", djmoney.models.fields.CurrencyField(choices=[("INR", "Indian Rupee"), ("USD", "US Dollar"), ("EUR", "Euro")], default="INR", editable=False, max_length=3)),
                ("price", djmoney.models.fields.MoneyField(decimal_places=2, default_currency="INR", max_digits=14, validators=[djmoney.models.validators.MinMoneyValidator(0)], verbose_name="Unit Price")),
                ("stock_quantity", models.PositiveIntegerField(default=0, verbose_name="Stock Quantity")),
                ("expiry_date", models.DateField(blank=True, null=True, verbose_name="Expiry Date")),
                ("low_stock_threshold", models.PositiveIntegerField(default=50, verbose_name="Low Stock Threshold")),
                ("expiry_alert_days", models.PositiveIntegerField(default=20, verbose_name="Days Before Expiry Alert")),
                ("procurement_price_currency", djmoney.models.fields.CurrencyField(choices=[("INR", "Indian Rupee"), ("USD", "US Dollar"), ("EUR", "Euro")], default="INR", editable=False, max_length=3, null=True)),
                ("procurement_price", djmoney.models.fields.MoneyField(blank=True, decimal_places=2, default=None, default_currency="INR", help_text="Total price paid for the whole lot", max_digits=14, null=True, validators=[djmoney.models.validators.MinMoneyValidator(0)], verbose_name="Total Procurement Cost")),
                ("lot_size", models.PositiveIntegerField(default=0, help_text="Quantity acquired in the current lot", verbose_name="Lot Size")),
                ("owner", models.ForeignKey(editable=False, on_delete=django.db.models.deletion.CASCADE, related_name="products", to=settings.AUTH_USER_MODEL, verbose_name="Owner")),
            ],
            options={
                "verbose_name": "Product",
                "verbose_name_plural": "Products",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["owner", "name"], name="products_pr_owner_i_5c1d2e_idx"),
                    models.Index(fields=["owner", "stock_quantity"], name="products_pr_owner_i_8f7a3b_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("stock_quantity__gte", 0)), name="non_negative_stock"),
                ],
            },
        ),
    ]
