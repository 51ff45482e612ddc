# signals.py
from django.dispatch import Signal

# Sent after a product write commits through the catalog services.
# Arguments: product (Product), created (bool)
product_saved = Signal()
