"""Product search service for catalog pickers and the inventory manager."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from retailops.core.config import settings
from retailops.core.fuzzy_match import best_match, fuzzy_search, validate_candidates
from retailops.core.logging import span
from retailops.domain.product import Product
from retailops.domain.search import MatchResult, MatchType


logger = logging.getLogger(__name__)

# Products may arrive as raw rows (dicts) or as Product models
ProductRecord = Mapping[str, Any] | Product


def _category_of(product: ProductRecord) -> object:
    if isinstance(product, Mapping):
        return product.get("category")
    return getattr(product, "category", None)


def _scope_to_category(products: Sequence[ProductRecord], category: str | None) -> Sequence[ProductRecord]:
    """Restrict products to a category; no category means the full catalog."""
    validate_candidates(products)
    if category is None:
        return products
    return [product for product in products if _category_of(product) == category]


def search_products(
    products: Sequence[ProductRecord],
    query: str | None,
    *,
    category: str | None = None,
    limit: int | None = None,
) -> list[MatchResult[ProductRecord]]:
    """Search products by name for a picker dropdown.

    Only products in the selected category are ranked. Until a category is
    selected, or when it has no products, the picker lists nothing.

    Args:
        products: Product rows or Product models
        query: User's search text (blank shows the first products)
        category: Selected category (None lists nothing)
        limit: Maximum results (defaults to the picker limit)

    Returns:
        Ranked search results
    """
    with span("product_search_service.search_products"):
        if limit is None:
            limit = settings.search_picker_limit

        validate_candidates(products)
        if category is None:
            return []

        scoped = _scope_to_category(products, category)
        results = fuzzy_search(query, scoped, key="name", limit=limit)

        logger.debug(
            f"Product search returned {len(results)} of {len(scoped)} products",
            extra={"category": category},
        )
        return results


def search_product_names(
    products: Sequence[ProductRecord],
    query: str | None,
    *,
    limit: int | None = None,
) -> list[ProductRecord]:
    """Search products by name and return the product records only.

    An empty query returns no products, since the inventory manager lists
    nothing until the user types. A whitespace-only query is not empty and
    lists the first products unranked.
    """
    with span("product_search_service.search_product_names"):
        validate_candidates(products)
        if not isinstance(query, str) or not query:
            return []

        if limit is None:
            limit = settings.search_picker_limit

        return [result.item for result in fuzzy_search(query, products, key="name", limit=limit)]


def find_auto_select(results: Sequence[MatchResult[ProductRecord]]) -> ProductRecord | None:
    """Return the top product when its similarity is confident enough to auto-select.

    Unranked results from a blank query are never auto-selected.

    Args:
        results: Ranked results, best first

    Returns:
        The top result's product, or None if there is no confident match
    """
    if not results:
        return None

    top = results[0]
    if top.match_type == MatchType.ALL:
        return None
    if top.similarity > settings.search_auto_select_similarity:
        logger.info(f"Auto-selected product: {top.text}")
        return top.item

    return None


def resolve_product(
    products: Sequence[ProductRecord],
    query: str | None,
    *,
    category: str | None = None,
) -> ProductRecord | None:
    """Resolve typed text to a single product, if one matches confidently."""
    with span("product_search_service.resolve_product"):
        validate_candidates(products)
        if not isinstance(query, str) or not query.strip():
            return None

        match = best_match(query, _scope_to_category(products, category), key="name")
        return find_auto_select([match]) if match else None
