"""Catalog entities: products, variants and their join rows."""
