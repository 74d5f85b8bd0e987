"""Benchmark script for the fuzzy product search.

This script benchmarks the latency and correctness of:
1. fuzzy_search - ranking a realistic product catalog per keystroke
2. product_search_service.search_products - category-scoped picker search

Tests verify that:
- Ranking happens before truncation (the best match sits last in the catalog)
- Every keystroke completes well under a typical input debounce interval
- Results never exceed the requested limit

The benchmark simulates:
- 300 products across 4 categories, names of a few dozen characters
- A user typing "strawberry kiwi" one character at a time
"""

import logging
import sys
import time
from pathlib import Path


# Add project root to pythonpath
sys.path.append(str(Path.cwd()))

from retailops.core.fuzzy_match import fuzzy_search
from retailops.core.logging import configure_logfire
from retailops.services import product_search_service


# Configure logging for benchmark output
logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)

DEBOUNCE_INTERVAL_MS = 300
CATEGORIES = ["fruities", "gourmands", "devices", "accessories"]
FLAVORS = ["Mango Ice", "Blue Razz", "Watermelon Chill", "Peach Tea", "Cola Lime", "Grape Soda"]


def build_catalog(size: int = 300) -> list[dict[str, object]]:
    """Build a synthetic catalog whose only exact 'Strawberry Kiwi' is the last row."""
    catalog: list[dict[str, object]] = [
        {
            "id": f"prod_{i}",
            "name": f"{FLAVORS[i % len(FLAVORS)]} {i} Edition",
            "category": CATEGORIES[i % len(CATEGORIES)],
        }
        for i in range(size - 1)
    ]
    catalog.append({"id": "prod_target", "name": "Strawberry Kiwi", "category": "fruities"})
    return catalog


def benchmark_keystrokes(catalog: list[dict[str, object]], phrase: str) -> list[float]:
    """Time one search per typed prefix of phrase.

    Returns:
        Duration of each search in milliseconds
    """
    durations: list[float] = []
    for end in range(1, len(phrase) + 1):
        start_time = time.perf_counter()
        results = fuzzy_search(phrase[:end], catalog, key="name", limit=10)
        durations.append((time.perf_counter() - start_time) * 1000)

        if len(results) > 10:
            logger.error(f"Limit violated for query {phrase[:end]!r}: {len(results)} results")
    return durations


def check_truncation_after_ranking(catalog: list[dict[str, object]]) -> bool:
    """Check the last catalog row wins when it is the only exact match."""
    results = fuzzy_search("Strawberry Kiwi", catalog, key="name", limit=1)
    return bool(results) and results[0].item["id"] == "prod_target"


def benchmark_picker(catalog: list[dict[str, object]]) -> float:
    """Time a category-scoped picker search in milliseconds."""
    start_time = time.perf_counter()
    product_search_service.search_products(catalog, "straw", category="fruities")
    return (time.perf_counter() - start_time) * 1000


def run_benchmark() -> int:
    """Run all benchmarks and display results.

    Returns:
        Process exit code (0 on success)
    """
    configure_logfire()
    catalog = build_catalog()

    logger.info("=" * 60)
    logger.info("Product Search Benchmark")
    logger.info("=" * 60)
    logger.info("")

    logger.info("Benchmarking fuzzy_search keystrokes...")
    durations = benchmark_keystrokes(catalog, "strawberry kiwi")

    logger.info("Benchmarking category-scoped picker search...")
    picker_ms = benchmark_picker(catalog)

    ranking_ok = check_truncation_after_ranking(catalog)

    logger.info("")
    logger.info("=" * 60)
    logger.info("Benchmark Results")
    logger.info("=" * 60)
    logger.info(f"  Catalog size:           {len(catalog)}")
    logger.info(f"  Keystrokes:             {len(durations)}")
    logger.info(f"  Worst keystroke:        {max(durations):.2f} ms")
    logger.info(f"  Mean keystroke:         {sum(durations) / len(durations):.2f} ms")
    logger.info(f"  Picker search:          {picker_ms:.2f} ms")
    logger.info(f"  Truncation after rank:  {'PASS' if ranking_ok else 'FAIL'}")

    if not ranking_ok:
        logger.error("Best match was lost to truncation")
        return 1
    if max(durations) > DEBOUNCE_INTERVAL_MS:
        logger.warning(f"Slowest keystroke exceeded the {DEBOUNCE_INTERVAL_MS} ms debounce interval")
        return 1

    logger.info("")
    logger.info("All checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(run_benchmark())
