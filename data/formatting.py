from decimal import Decimal

from babel.numbers import format_currency as babel_format_currency
from flask import current_app, has_app_context


def format_currency(amount, currency=None, locale=None):
    """Format an amount held in minor units, e.g. 123456 -> '$1,234.56'."""
    if has_app_context():
        currency = currency or current_app.config.get('CURRENCY', 'USD')
        locale = locale or current_app.config.get('BABEL_DEFAULT_LOCALE', 'en_US')
    major = Decimal(amount or 0) / 100
    return babel_format_currency(major, currency or 'USD', locale=locale or 'en_US')
