"""
Flask CLI commands
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash

from catalog_admin.extensions import db
from catalog_admin.models import Admin
from catalog_admin.services.catalog import find_admin_by_email


@click.command('create-admin')
@click.option('--email', prompt=True, help='Login email of the new admin.')
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True,
              help='Password of the new admin.')
@click.option('--name', default=None, help='Display name.')
@with_appcontext
def create_admin_command(email, password, name):
    """Create an admin account."""
    email = email.strip()
    if not email or not password:
        raise click.UsageError('email and password are required')

    if find_admin_by_email(email) is not None:
        raise click.ClickException(f'An admin with email {email} already exists')

    admin = Admin(
        email=email,
        name=name,
        password_hash=generate_password_hash(password, method=current_app.config['PASSWORD_HASH_METHOD']),
    )
    try:
        db.session.add(admin)
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise click.ClickException(f'An admin with email {email} already exists')

    click.echo(f'Admin {email} created')


def register_commands(app):
    app.cli.add_command(create_admin_command)
