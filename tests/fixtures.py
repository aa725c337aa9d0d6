"""Builders for small on-disk datasets used by loader and accessor tests."""

import json
from pathlib import Path


def make_loop(loop_id: int, *, origin: str = "DIGITAL", difficulty: float = 5, tags: list[str] | None = None,
              name: str | None = None, given: str = "A trigger", result: str = "An outcome",
              valences: list[str] | None = None) -> dict:
    """A loop record in on-disk (camelCase) form."""
    return {
        "id": loop_id,
        "name": name or f"Loop {loop_id}",
        "logic": {"given": given, "when": "An event", "then": "A behavior", "result": result},
        "taxonomy": {
            "origin": origin,
            "modality": "META",
            "mutability": "FLUID",
            "valences": valences if valences is not None else ["TRUST"],
        },
        "operator": {"name": "Operator", "mechanism": "Mechanism"},
        "veracity": {
            "objectiveGrounding": 0.5,
            "socialConsensus": 0.5,
            "recursiveAmplification": 0.5,
            "frictionIndex": 0.5,
        },
        "intervention": {"difficulty": difficulty},
        "meta": {"tags": tags if tags is not None else []},
    }


def make_category(category_id: str, number: int, loops: list[dict]) -> dict:
    return {
        "id": category_id,
        "categoryNumber": number,
        "name": category_id.title(),
        "description": f"{category_id} loops",
        "loops": loops,
    }


def make_loops_document(categories: list[dict], *, total_loops: int | None = None,
                        total_categories: int | None = None) -> dict:
    actual_loops = sum(len(c["loops"]) for c in categories)
    return {
        "metadata": {
            "title": "Test Loops",
            "version": "0.0.1",
            "description": "Fixture dataset",
            "totalCategories": len(categories) if total_categories is None else total_categories,
            "totalLoops": actual_loops if total_loops is None else total_loops,
            "generatedAt": "2026-01-01T00:00:00Z",
            "interventionsAdded": actual_loops,
            "updatedAt": "2026-01-01T00:00:00Z",
        },
        "categories": categories,
    }


def write_document(directory: Path, name: str, payload) -> Path:
    path = directory / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
