"""Dataset loading errors.

Lookups never raise: "not found" is ``None`` or an empty list. Only a
document that cannot be read, parsed or mapped onto the record models
raises, and it raises ``DatasetError`` naming the document.
"""

from pathlib import Path


class DatasetError(Exception):
    """A dataset document is missing, is not valid JSON, or has the wrong shape."""

    def __init__(self, document: str, path: Path, problem: str):
        self.document = document
        self.path = path
        self.problem = problem
        super().__init__(f"{document}: {problem} ({path})")
