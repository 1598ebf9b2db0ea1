# enterprise.py
"""Device-policy overridable strings and icons, with built-in fallbacks."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import yaml

from .config import ENTERPRISE_OVERRIDES_PATH
from .context import CapabilityContext, EnterpriseOverrideProvider
from .resources import IconRef, Resources


logger = logging.getLogger("docsui_status.enterprise")


# ---------------------------------------------------------------------------
# Updatable keys
# ---------------------------------------------------------------------------

WORK_PROFILE_OFF_ERROR_TITLE = "DocumentsUi.WORK_PROFILE_OFF_ERROR_TITLE"
WORK_PROFILE_OFF_ENABLE_BUTTON = "DocumentsUi.WORK_PROFILE_OFF_ENABLE_BUTTON"
CANT_SELECT_WORK_FILES_TITLE = "DocumentsUi.CANT_SELECT_WORK_FILES_TITLE"
CANT_SELECT_WORK_FILES_MESSAGE = "DocumentsUi.CANT_SELECT_WORK_FILES_MESSAGE"
CANT_SELECT_PERSONAL_FILES_TITLE = "DocumentsUi.CANT_SELECT_PERSONAL_FILES_TITLE"
CANT_SELECT_PERSONAL_FILES_MESSAGE = "DocumentsUi.CANT_SELECT_PERSONAL_FILES_MESSAGE"
CANT_SAVE_TO_WORK_TITLE = "DocumentsUi.CANT_SAVE_TO_WORK_TITLE"
CANT_SAVE_TO_WORK_MESSAGE = "DocumentsUi.CANT_SAVE_TO_WORK_MESSAGE"
CANT_SAVE_TO_PERSONAL_TITLE = "DocumentsUi.CANT_SAVE_TO_PERSONAL_TITLE"
CANT_SAVE_TO_PERSONAL_MESSAGE = "DocumentsUi.CANT_SAVE_TO_PERSONAL_MESSAGE"
CROSS_PROFILE_NOT_ALLOWED_TITLE = "DocumentsUi.CROSS_PROFILE_NOT_ALLOWED_TITLE"
CROSS_PROFILE_NOT_ALLOWED_MESSAGE = "DocumentsUi.CROSS_PROFILE_NOT_ALLOWED_MESSAGE"

WORK_PROFILE_OFF_ICON = "WORK_PROFILE_OFF_ICON"
OUTLINE = "OUTLINE"


class EnterpriseStringResolver:
    """Prefer a device-policy override when the context allows it, else the built-in default.

    The override provider is always handed a fallback closure, so every call
    returns something renderable.
    """

    def __init__(
        self,
        resources: Resources,
        override_provider: Optional[EnterpriseOverrideProvider] = None,
    ) -> None:
        self.resources = resources
        self.override_provider = override_provider

    def _provider_for(self, context: CapabilityContext) -> Optional[EnterpriseOverrideProvider]:
        if not context.enterprise_strings_supported:
            return None
        if self.override_provider is None:
            logger.debug("enterprise strings supported but no override provider present")
        return self.override_provider

    def resolve(self, updatable_key: str, fallback_key: str, context: CapabilityContext) -> str:
        provider = self._provider_for(context)
        if provider is None:
            return self.resources.get_string(fallback_key)
        return provider.get_string(updatable_key, lambda: self.resources.get_string(fallback_key))

    def resolve_icon(
        self,
        updatable_key: str,
        fallback_key: str,
        context: CapabilityContext,
        style: str = OUTLINE,
    ) -> IconRef:
        provider = self._provider_for(context)
        if provider is None:
            return self.resources.get_drawable(fallback_key)
        return provider.get_drawable(
            updatable_key, style, lambda: self.resources.get_drawable(fallback_key)
        )


# ---------------------------------------------------------------------------
# Mapping-backed override provider
# ---------------------------------------------------------------------------

class StaticOverrideProvider:
    """Override provider backed by plain mappings (e.g. a policy file)."""

    def __init__(
        self,
        strings: Optional[Dict[str, str]] = None,
        drawables: Optional[Dict[str, str]] = None,
    ) -> None:
        self.strings: Dict[str, str] = dict(strings or {})
        self.drawables: Dict[str, str] = dict(drawables or {})

    @classmethod
    def from_yaml(cls, path: str) -> "StaticOverrideProvider":
        try:
            with open(path, "r", encoding="utf-8") as f:
                data: Dict[str, Any] = yaml.safe_load(f) or {}
        except Exception as e:
            logger.warning("failed to load enterprise overrides '%s': %s", path, e)
            data = {}
        return cls(
            strings={str(k): str(v) for k, v in (data.get("strings") or {}).items()},
            drawables={str(k): str(v) for k, v in (data.get("drawables") or {}).items()},
        )

    def get_string(self, key: str, fallback: Callable[[], str]) -> str:
        value = self.strings.get(key)
        return value if value is not None else fallback()

    def get_drawable(self, key: str, style: str, fallback: Callable[[], IconRef]) -> IconRef:
        name = self.drawables.get(key)
        if name is None:
            return fallback()
        return IconRef(name=name, style=style)


def load_override_provider(path: str = ENTERPRISE_OVERRIDES_PATH) -> Optional[StaticOverrideProvider]:
    """Return the configured override provider, or None when none is configured."""
    if not path:
        return None
    return StaticOverrideProvider.from_yaml(path)
