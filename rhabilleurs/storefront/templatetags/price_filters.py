"""
Filtres de formatage des prix pour les templates.

Usage:
    {% load price_filters %}
    {{ watch.price|chf }}  ->  CHF 8 300
"""
from decimal import Decimal, InvalidOperation

from django import template
from django.utils import numberformat

register = template.Library()

# fr-CH: narrow no-break space between thousands, comma before decimals
GROUP_SEPARATOR = '\u202f'
DECIMAL_SEPARATOR = ','


def format_amount(value) -> str:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return ''
    if not amount.is_finite():
        return ''

    amount = amount.quantize(Decimal('0.01'))
    # Les centimes ne sont affichés que s'ils ne sont pas nuls
    decimal_pos = 0 if amount == amount.to_integral_value() else 2
    return str(numberformat.format(
        amount,
        DECIMAL_SEPARATOR,
        decimal_pos=decimal_pos,
        grouping=3,
        thousand_sep=GROUP_SEPARATOR,
        force_grouping=True,
    ))


@register.filter
def chf(value):
    """Prix en francs suisses, formaté à la manière fr-CH."""
    amount = format_amount(value)
    return f"CHF {amount}" if amount else ''
