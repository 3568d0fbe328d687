"""
Product Routes

Create, list, show, edit and delete catalog products. Every view is behind
`admin_required`; image attachment is best-effort and never fails the
enclosing operation.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, abort
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError

from catalog_admin.auth.decorators import admin_required
from catalog_admin.errors import ValidationError
from catalog_admin.extensions import db
from catalog_admin.products import products_bp
from catalog_admin.products.forms import parse_product_form
from catalog_admin.services import catalog
from catalog_admin.services.uploads import UploadError, get_uploader

logger = logging.getLogger(__name__)


def _get_product_or_404(product_id):
    product = catalog.get_product(product_id)
    if product is None:
        abort(404)
    return product


def _render_form(product=None, errors=None, error=None, status=200):
    return render_template('products/form.html',
                           product=product,
                           form=request.form,
                           errors=errors or {},
                           error=error), status


def _attach_image(product, part):
    """Upload `part` and attach it to `product`; failures are logged only."""
    uploader = get_uploader()
    try:
        uploaded = uploader.upload(part)
    except UploadError as e:
        logger.error('Product %s saved without its new image: %s', product.id, e)
        return None

    if uploaded is None:
        return None

    try:
        return catalog.add_image(product, uploaded.url, uploaded.public_id)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not record image %s for product %s', uploaded.public_id, product.id)
        # the blob has no row pointing at it any more
        uploader.delete(uploaded.public_id)
        return None


@products_bp.route('/products')
@admin_required
def list_products():
    """All products, newest first."""
    products = catalog.list_products()
    return render_template('products/list.html', products=products, admin=current_user)


@products_bp.route('/products/new', methods=['GET', 'POST'])
@admin_required
def new_product():
    """Create a product, optionally with one image."""
    if request.method == 'POST':
        try:
            fields = parse_product_form(request.form)
        except ValidationError as e:
            return _render_form(errors=e.errors, error=e.message, status=400)

        try:
            product = catalog.create_product(fields.name, fields.description, fields.price,
                                             admin_id=current_user.id)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Product creation failed')
            return _render_form(error='Could not create the product.', status=400)

        logger.info('Admin %s created product %s', current_user.email, product.id)
        _attach_image(product, request.files.get('image'))

        flash(f'Product "{product.name}" created.', 'success')
        return redirect(url_for('products.list_products'))

    return _render_form()


@products_bp.route('/products/<int:product_id>', methods=['GET', 'POST'])
@admin_required
def product_detail(product_id):
    """Show a product; POST with intent=delete removes it."""
    if request.method == 'POST':
        return _delete_product(product_id)

    product = _get_product_or_404(product_id)
    return render_template('products/detail.html', product=product, admin=current_user)


def _delete_product(product_id):
    if request.form.get('intent') != 'delete':
        abort(400)

    product = _get_product_or_404(product_id)

    # Remote blobs first, each one independently, then the row itself.
    uploader = get_uploader()
    failed = [image.public_id for image in product.images
              if not uploader.delete(image.public_id)]
    if failed:
        logger.warning('Product %s deleted with %d remote image(s) left behind: %s',
                       product.id, len(failed), ', '.join(failed))

    name = product.name
    try:
        catalog.delete_product(product)
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Could not delete product %s', product_id)
        abort(500)

    logger.info('Admin %s deleted product %s', current_user.email, product_id)
    flash(f'Product "{name}" deleted.', 'success')
    return redirect(url_for('products.list_products'))


@products_bp.route('/products/<int:product_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_product(product_id):
    """Update name, description and price; a new image is added to the existing ones."""
    product = _get_product_or_404(product_id)

    if request.method == 'POST':
        try:
            fields = parse_product_form(request.form)
        except ValidationError as e:
            return _render_form(product=product, errors=e.errors, error=e.message, status=400)

        try:
            catalog.update_product(product, fields.name, fields.description, fields.price)
        except SQLAlchemyError:
            db.session.rollback()
            logger.exception('Could not update product %s', product_id)
            return _render_form(product=product, error='Could not update the product.', status=400)

        logger.info('Admin %s updated product %s', current_user.email, product.id)
        _attach_image(product, request.files.get('image'))

        flash('Product updated.', 'success')
        return redirect(url_for('products.product_detail', product_id=product.id))

    return _render_form(product=product)
