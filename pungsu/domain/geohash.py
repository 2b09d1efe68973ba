"""Hachage déterministe des coordonnées.

Une même position (arrondie à 4 décimales) produit toujours le même entier, ce qui garantit
une lecture "feng-shui" stable pour un logement donné. Ce n'est pas le Geohash géographique
standard: c'est un hachage de type DJB2 sur la représentation texte des coordonnées.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_INT32_SPAN = 1 << 32
_INT32_MIN = 1 << 31
_FOUR_PLACES = Decimal("0.0001")
# assez de chiffres pour quantifier tout float fini
_QUANTIZE_CONTEXT = Context(prec=400)


def _to_int32(value: int) -> int:
    """Tronque un entier à la sémantique d'un entier signé 32 bits."""
    return (value + _INT32_MIN) % _INT32_SPAN - _INT32_MIN


def to_fixed4(value: float) -> str:
    """Formate `value` avec 4 décimales, arrondi au plus proche (égalités loin de zéro).

    `format(x, ".4f")` arrondit les égalités exactes au pair (0.03125 -> "0.0312");
    l'arrondi décimal exact ici donne "0.0313". -0.0 s'écrit "0.0000".
    """
    if not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    quantized = Decimal(value).quantize(
        _FOUR_PLACES, rounding=ROUND_HALF_UP, context=_QUANTIZE_CONTEXT
    )
    if value == 0:
        quantized = abs(quantized)
    return format(quantized, "f")


def string_hash(text: str) -> int:
    """Hachage glissant `h = (h << 5) - h + code`, tronqué en int32 à chaque caractère."""
    h = 0
    for char in text:
        h = _to_int32((h << 5) - h + ord(char))
    return h


def geo_hash(lat: float, lng: float) -> int:
    """Retourne un entier positif ou nul stable pour la paire (lat, lng).

    L'ordre des arguments compte: `geo_hash(lng, lat)` donne une autre valeur.
    """
    return abs(string_hash(f"{to_fixed4(lat)}{to_fixed4(lng)}"))
