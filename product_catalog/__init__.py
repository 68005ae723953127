"""Product catalog data-access layer.

Products, variant types and per-product variant values persisted through
SQLModel, with a small service layer for creating, listing, showing and
searching products.
"""

__version__ = "0.1.0"
