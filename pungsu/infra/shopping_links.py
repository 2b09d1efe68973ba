"""Construction des liens de recherche marchande pour les objets recommandés.

L'hôte et le paramètre de requête relèvent de la configuration de présentation; le moteur
ne fournit que le `search_keyword` en texte brut.
"""

from urllib.parse import quote

from pungsu.domain.entities import RecommendationItem


def build_search_url(keyword: str, base_url: str, query_param: str = "query") -> str:
    """Retourne `<base_url>?<query_param>=<mot-clé encodé>` (encodage pourcent, espaces en %20).

    Si `base_url` contient déjà une query string, le paramètre y est ajouté avec `&`.
    """
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{quote(query_param, safe='')}={quote(keyword, safe='')}"


def shopping_links(
    items: list[RecommendationItem], base_url: str, query_param: str = "query"
) -> list[dict[str, object]]:
    """Un lien `{id, url}` par objet, dans l'ordre des recommandations."""
    return [
        {"id": item.id, "url": build_search_url(item.search_keyword, base_url, query_param)}
        for item in items
    ]
