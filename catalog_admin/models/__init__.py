"""
Models Package

Exports all models for easy importing.
"""

from catalog_admin.models.admin import Admin
from catalog_admin.models.product import Product, ProductImage

__all__ = ['Admin', 'Product', 'ProductImage']
