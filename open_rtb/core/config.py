"""Serialization configuration.

SerializationConfig is a Pydantic model for type-safe JSON output options.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel


class SerializationConfig(BaseModel):
    """Options for turning a Structural Result into JSON text."""

    indent: int | None = None
    sort_keys: bool = False
    ensure_ascii: bool = False
    compact: bool = True

    def dumps(self, data: Any) -> str:
        """Encode data as JSON with these options."""
        separators = (",", ":") if self.compact and self.indent is None else None
        return json.dumps(
            data,
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
            separators=separators,
            allow_nan=False,
        )


DEFAULT_CONFIG = SerializationConfig()
