# resources.py
"""Built-in string and icon table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from .config import STRINGS_PATH


logger = logging.getLogger("docsui_status.resources")


@dataclass(frozen=True)
class IconRef:
    """Opaque icon reference handed to the rendering layer."""

    name: str
    style: str = ""


class Resources:
    def __init__(
        self,
        strings: Optional[Dict[str, str]] = None,
        drawables: Optional[Dict[str, str]] = None,
    ) -> None:
        self._strings: Dict[str, str] = dict(strings or {})
        self._drawables: Dict[str, str] = dict(drawables or {})

    @classmethod
    def from_yaml(cls, path: str) -> "Resources":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data: Dict[str, Any] = yaml.safe_load(f) or {}
        except Exception as e:
            logger.warning("failed to load string table '%s': %s", path, e)
            data = {}
        return cls(
            strings={str(k): str(v) for k, v in (data.get("strings") or {}).items()},
            drawables={str(k): str(v) for k, v in (data.get("drawables") or {}).items()},
        )

    @classmethod
    def from_config(cls) -> "Resources":
        return cls.from_yaml(STRINGS_PATH)

    def has_string(self, key: str) -> bool:
        return key in self._strings

    def string_keys(self):
        return sorted(self._strings)

    def get_string(self, key: str, *args: Any) -> str:
        """Format the template for *key*; missing keys resolve to ""."""
        template = self._strings.get(key)
        if template is None:
            logger.warning("missing string resource: %s", key)
            return ""
        if not args:
            return template
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError) as e:
            logger.warning("bad arguments for string resource %s: %s", key, e)
            return template

    def get_drawable(self, key: str) -> IconRef:
        name = self._drawables.get(key)
        if name is None:
            logger.warning("missing drawable resource: %s", key)
            name = key
        return IconRef(name=name)
