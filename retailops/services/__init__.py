from retailops.services import product_search_service


__all__ = [
    "product_search_service",
]
