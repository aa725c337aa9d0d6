"""Aggregate statistics over the loop dataset and table rendering."""

import logging
import math
from dataclasses import dataclass, field

from rich.table import Table

from behavioral_taxonomy.loops import get_all_loops, get_behavioral_loops
from behavioral_taxonomy.models import enum_value

logger = logging.getLogger(__name__)


@dataclass
class TaxonomyStatistics:
    total_loops: int  # declared in metadata, not recounted
    total_categories: int  # declared in metadata, not recounted
    loops_by_origin: dict[str, int] = field(default_factory=dict)
    average_intervention_difficulty: float = 0.0


def _round_half_up(value: float, places: int = 1) -> float:
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale


def check_declared_totals() -> list[str]:
    """Compare declared metadata totals with the loaded data.

    Returns one message per mismatch; an empty list means the metadata
    agrees with the categories and loops actually present.
    """
    data = get_behavioral_loops()
    actual_categories = len(data.categories)
    actual_loops = sum(len(c.loops) for c in data.categories)

    problems = []
    if data.metadata.total_categories != actual_categories:
        problems.append(
            f"metadata declares {data.metadata.total_categories} categories, dataset has {actual_categories}"
        )
    if data.metadata.total_loops != actual_loops:
        problems.append(
            f"metadata declares {data.metadata.total_loops} loops, dataset has {actual_loops}"
        )
    return problems


def get_statistics() -> TaxonomyStatistics:
    """Gather dataset statistics into a plain dataclass (no display side-effects).

    Totals come from the declared metadata. Any disagreement with the loaded
    data is logged as a warning, but the declared values are still reported.
    """
    data = get_behavioral_loops()
    all_loops = get_all_loops()

    for problem in check_declared_totals():
        logger.warning(f"Declared totals drift: {problem}")

    loops_by_origin: dict[str, int] = {}
    for loop in all_loops:
        origin = enum_value(loop.taxonomy.origin)
        loops_by_origin[origin] = loops_by_origin.get(origin, 0) + 1

    if all_loops:
        avg = sum(loop.intervention.difficulty for loop in all_loops) / len(all_loops)
        avg_difficulty = _round_half_up(avg)
    else:
        avg_difficulty = 0.0

    return TaxonomyStatistics(
        total_loops=data.metadata.total_loops,
        total_categories=data.metadata.total_categories,
        loops_by_origin=loops_by_origin,
        average_intervention_difficulty=avg_difficulty,
    )


def render_statistics_table(stats: TaxonomyStatistics) -> Table:
    """Build a Rich Table from TaxonomyStatistics using semantic styles."""
    table = Table(title="Behavioral Taxonomy Statistics")
    table.add_column("Metric", style="accent")
    table.add_column("Value", style="info", justify="right")

    table.add_row("Categories", str(stats.total_categories))
    table.add_row("Loops", str(stats.total_loops))
    for origin, count in stats.loops_by_origin.items():
        table.add_row(f"  {origin.title()}", str(count))
    table.add_row("Avg. intervention difficulty", f"{stats.average_intervention_difficulty:.1f}")

    return table
