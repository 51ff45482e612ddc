import uuid

import django.db.models.deletion
import django.utils.timezone
import djmoney.models.fields
import djmoney.models.validators
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("products", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Sale",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created At")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Updated At")),
                ("quantity", models.PositiveIntegerField(verbose_name="Quantity")),
                ("total_price_currency", djmoney.models.fields.CurrencyField(choices=[("INR", "Indian Rupee"), ("USD", "US Dollar"), ("EUR", "Euro")], default="INR", editable=False, max_length=3)),
                ("total_price", djmoney.models.fields.MoneyField(decimal_places=2, default_currency="INR", help_text="Unit price at the time of sale times quantity", max_digits=14, validators=[djmoney.models.validators.MinMoneyValidator(0)], verbose_name="Total Price")),
                ("profit_currency", djmoney.models.fields.CurrencyField(choices=[("INR", "Indian Rupee"), ("USD", "US Dollar"), ("EUR", "Euro")], default="INR", editable=False, max_length=3, null=True)),
                ("profit", djmoney.models.fields.MoneyField(blank=True, decimal_places=2, default=None, default_currency="INR", help_text="Empty when the product has no procurement cost", max_digits=14, null=True, verbose_name="Profit")),
                ("sale_date", models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="Sale Date")),
                ("owner", models.ForeignKey(editable=False, on_delete=django.db.models.deletion.CASCADE, related_name="sales", to=settings.AUTH_USER_MODEL, verbose_name="Owner")),
                ("product", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="sales", to="products.product", verbose_name="Product")),
            ],
            options={
                "verbose_name": "Sale",
                "verbose_name_plural": "Sales",
                "ordering": ["-sale_date"],
                "indexes": [
                    models.Index(fields=["owner", "-sale_date"], name="sales_sale_owner_i_3e9b1c_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(condition=models.Q(("quantity__gt", 0)), name="positive_sale_quantity"),
                ],
            },
        ),
    ]
