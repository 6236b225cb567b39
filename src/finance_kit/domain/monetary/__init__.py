"""Monetary domain package.

This package contains the `Money` value type and the `Currency` descriptors it is
tagged with. Money keeps an exact, unrounded Decimal and exposes a banker's-rounded
2-digit amount for display, comparison and serialization.
"""
