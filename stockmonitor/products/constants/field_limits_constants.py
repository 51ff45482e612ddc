class FieldLimits:
    """Maximum field lengths for models"""

    PRODUCT_NAME = 255     # Product names
    CATEGORY_NAME = 100    # Free-text categories
