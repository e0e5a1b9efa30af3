from decimal import Decimal, InvalidOperation

from django import template

register = template.Library()


@register.filter
def multiply(value, arg):
    try:
        return Decimal(str(value)) * Decimal(str(arg))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal('0')


@register.filter
def currency(value):
    try:
        return f"${Decimal(str(value)):.2f}"
    except (InvalidOperation, ValueError, TypeError):
        return "$0.00"


@register.filter
def short_id(value):
    return str(value)[:8]
