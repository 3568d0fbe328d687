"""
Product and Product Image Models
"""

from datetime import datetime

from catalog_admin.extensions import db


class Product(db.Model):
    """Catalog product owned by the admin that created it"""
    __tablename__ = 'products'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    admin_id = db.Column(db.Integer, db.ForeignKey('admins.id'), nullable=False, index=True)

    # Images in upload order; the first one is shown as the primary image
    images = db.relationship('ProductImage', backref='product', lazy=True,
                             order_by='[ProductImage.created_at, ProductImage.id]',
                             cascade='all, delete-orphan')

    @property
    def primary_image(self):
        return self.images[0] if self.images else None

    def __repr__(self):
        return f'<Product {self.name}>'


class ProductImage(db.Model):
    """Image hosted on the remote blob store"""
    __tablename__ = 'product_images'

    id = db.Column(db.Integer, primary_key=True)
    url = db.Column(db.String(500), nullable=False)
    public_id = db.Column(db.String(255), nullable=False)  # handle needed to delete the remote blob
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def __repr__(self):
        return f'<ProductImage {self.public_id}>'
