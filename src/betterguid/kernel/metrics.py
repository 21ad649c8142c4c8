"""
Prometheus metrics collection for betterguid.

Counters only: generation is too fast for per-call latency histograms to be
worth their cost.
"""

from prometheus_client import Counter

# ============================================================================
# Generation Metrics
# ============================================================================

ids_generated_total = Counter(
    "betterguid_ids_generated_total",
    "Total number of identifiers generated",
    ["order"],  # order: ascending, descending
)

same_ms_collisions_total = Counter(
    "betterguid_same_ms_collisions_total",
    "Identifiers generated in the same millisecond as the previous one",
    ["order"],
)

suffix_wraps_total = Counter(
    "betterguid_suffix_wraps_total",
    "Times a same-millisecond suffix increment overflowed back to zero",
)

# ============================================================================
# Helper Functions
# ============================================================================


def record_generation(order: str, collided: bool, wrapped: bool) -> None:
    """
    Record one generated identifier.

    Args:
        order: Sort order value ("ascending" or "descending")
        collided: Whether the timestamp matched the previous call
        wrapped: Whether the suffix increment overflowed
    """
    ids_generated_total.labels(order=order).inc()
    if collided:
        same_ms_collisions_total.labels(order=order).inc()
    if wrapped:
        suffix_wraps_total.inc()
