"""
Catalog Store

Persistence operations for admins, products and product images.
"""

from sqlalchemy.orm import selectinload

from catalog_admin.extensions import db
from catalog_admin.models import Admin, Product, ProductImage


def find_admin_by_email(email):
    """Exact, case-sensitive lookup on the stored email."""
    return Admin.query.filter_by(email=email).first()


def count_admins():
    return Admin.query.count()


def count_products():
    return Product.query.count()


def count_images():
    return ProductImage.query.count()


def list_products(limit=None):
    """Products newest first, each with its images in upload order."""
    query = Product.query.options(selectinload(Product.images)) \
        .order_by(Product.created_at.desc(), Product.id.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_product(product_id):
    return db.session.get(Product, product_id)


def create_product(name, description, price, admin_id):
    product = Product(name=name, description=description, price=price, admin_id=admin_id)
    db.session.add(product)
    db.session.commit()
    return product


def update_product(product, name, description, price):
    """Update the editable fields only; images are left untouched."""
    product.name = name
    product.description = description
    product.price = price
    db.session.commit()
    return product


def add_image(product, url, public_id):
    image = ProductImage(product_id=product.id, url=url, public_id=public_id)
    db.session.add(image)
    db.session.commit()
    return image


def delete_product(product):
    """Delete the product row; its image rows go with it."""
    db.session.delete(product)
    db.session.commit()
