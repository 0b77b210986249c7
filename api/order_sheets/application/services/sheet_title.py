"""
Resolucion del titulo de la pestana a partir del nombre de la orden.
"""
import re

from order_sheets.shared.constants.sheet_constants import (
    FALLBACK_SHEET_TITLE,
    FORBIDDEN_TITLE_CHARS,
    MAX_TITLE_LENGTH,
)

_FORBIDDEN_RE = re.compile("[" + re.escape(FORBIDDEN_TITLE_CHARS) + "]")


def resolve_sheet_title(display_name: str) -> str:
    """
    Convierte un texto libre en un titulo de pestana valido.

    Cada caracter prohibido se reemplaza por un espacio, se recortan los
    espacios de los extremos y se trunca a 100 caracteres. Si no queda nada,
    retorna "Order".

    Ejemplo:
        >>> resolve_sheet_title("Order #12[x]")
        'Order #12 x'
    """
    cleaned = _FORBIDDEN_RE.sub(" ", display_name or "").strip()
    return cleaned[:MAX_TITLE_LENGTH] or FALLBACK_SHEET_TITLE
