"""Catalog service: users, categories and products with a cached product report."""
