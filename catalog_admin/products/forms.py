"""
Product form validation
"""

from collections import namedtuple
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from catalog_admin.errors import ValidationError

ProductFields = namedtuple('ProductFields', ['name', 'description', 'price'])

CENTS = Decimal('0.01')
# Numeric(10, 2)
MAX_PRICE = Decimal('99999999.99')


def parse_price(raw):
    """Parse a price string into a non-negative Decimal rounded to cents.

    Returns None when the value is missing, not a finite number, or negative.
    """
    raw = (raw or '').strip()
    if not raw:
        return None
    try:
        price = Decimal(raw)
        if not price.is_finite() or price < 0:
            return None
        return price.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None


def parse_product_form(form):
    """Validate the create/edit form.

    Raises:
        ValidationError: listing every missing or invalid field.
    """
    errors = {}

    name = (form.get('name') or '').strip()
    if not name:
        errors['name'] = 'Name is required.'

    raw_price = form.get('price')
    price = parse_price(raw_price)
    if price is None:
        if (raw_price or '').strip():
            errors['price'] = 'Price must be a non-negative number.'
        else:
            errors['price'] = 'Price is required.'
    elif price > MAX_PRICE:
        errors['price'] = 'Price is too large.'

    if errors:
        raise ValidationError(errors)

    description = (form.get('description') or '').strip() or None
    return ProductFields(name=name, description=description, price=price)
