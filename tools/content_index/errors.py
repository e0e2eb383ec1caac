from __future__ import annotations

import pathlib
from typing import Any


class ContentError(Exception):
    """Base class for content index failures."""


class NotFound(ContentError):
    def __init__(self, category, identifier: str) -> None:
        self.category = category
        self.identifier = identifier
        super().__init__(f"no {category} named {identifier!r}")


class MalformedContent(ContentError):
    def __init__(self, path: pathlib.Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class InvalidNumericField(ContentError, ValueError):
    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: {value!r} is not a number")
