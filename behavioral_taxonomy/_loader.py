"""Load the static dataset documents once and memoize them.

Documents are read from ``settings.resolved_data_dir()``; the packaged
``data/`` directory is the default. Each document is parsed at most once per
resolved path until ``clear_cache()`` is called.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, TypeVar

from pydantic import ValidationError

from behavioral_taxonomy._errors import DatasetError
from behavioral_taxonomy.config import get_settings

logger = logging.getLogger(__name__)

LOOPS_DOCUMENT = "behavioralLoops.json"
EMOTIONS_DOCUMENT = "emotions.json"
BIASES_DOCUMENT = "biases.json"
TRAITS_DOCUMENT = "traits.json"

T = TypeVar("T")

# Raw JSON keyed by resolved path; parsed views keyed by (view name, path).
_documents: dict[Path, Any] = {}
_views: dict[tuple[str, Path], Any] = {}


def document_path(name: str) -> Path:
    """Resolve a document name against the configured data directory."""
    return (get_settings().resolved_data_dir() / name).resolve()


def load_document(name: str) -> Any:
    """Return the decoded JSON for ``name``, reading it on first use.

    Raises:
        DatasetError: the file is missing, unreadable or not valid JSON.
    """
    path = document_path(name)
    if path in _documents:
        return _documents[path]

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DatasetError(name, path, "document not found") from e
    except json.JSONDecodeError as e:
        raise DatasetError(name, path, f"invalid JSON at line {e.lineno} column {e.colno}") from e
    except OSError as e:
        raise DatasetError(name, path, f"cannot read document: {e}") from e

    logger.info(f"Loaded {name} from {path}")
    _documents[path] = data
    return data


def load_view(view: str, name: str, build: Callable[[Any], T]) -> T:
    """Memoize ``build(raw_document)`` for the current data directory.

    A ``ValidationError`` or a shape mismatch raised by ``build`` is reported
    as a ``DatasetError`` for ``name``.
    """
    key = (view, document_path(name))
    if key in _views:
        return _views[key]

    raw = load_document(name)
    try:
        parsed = build(raw)
    except ValidationError as e:
        raise DatasetError(name, key[1], f"unexpected record shape: {e.error_count()} validation error(s)\n{e}") from e
    except (AttributeError, TypeError) as e:
        raise DatasetError(name, key[1], f"unexpected document shape: {e}") from e

    _views[key] = parsed
    return parsed


def clear_cache() -> None:
    """Forget every memoized document and view."""
    _documents.clear()
    _views.clear()
