# licenser:header:start
#
#   project      : Licenser
#   file         : store.py
#   file_relpath : src/licenser/templates/store.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Template storage: bundled licenses plus custom templates from configuration.

Built-in templates are ``.txt`` resources of `licenser.templates.builtin`, read
with `importlib.resources` and looked up case-insensitively (``"MIT"`` and
``"mit"`` are the same license). Custom templates come from the ``[templates]``
table of the configuration; a custom template shadows a built-in one with the
same name.

A missing template is not an error: `TemplateStore.get_template` returns
``None`` and the caller decides how to report it.
"""

from __future__ import annotations

from importlib.resources import files
from types import MappingProxyType
from typing import TYPE_CHECKING

from licenser.config.keys import Toml
from licenser.config.loaders import write_toml_table
from licenser.config.logging import get_logger
from licenser.constants import BUILTIN_TEMPLATE_PACKAGE
from licenser.templates.model import LicenseTemplate

if TYPE_CHECKING:
    import sys
    from collections.abc import Mapping
    from pathlib import Path

    if sys.version_info < (3, 14):
        from importlib.abc import Traversable
    else:
        from importlib.resources.abc import Traversable

    from licenser.config.logging import LicenserLogger
    from licenser.config.model import Config

logger: LicenserLogger = get_logger(__name__)

TEMPLATE_SUFFIX: str = ".txt"


def _builtin_resources() -> dict[str, Traversable]:
    root: Traversable = files(BUILTIN_TEMPLATE_PACKAGE)
    return {
        entry.name[: -len(TEMPLATE_SUFFIX)].lower(): entry
        for entry in root.iterdir()
        if entry.is_file() and entry.name.endswith(TEMPLATE_SUFFIX)
    }


class TemplateStore:
    """Lookup and editing of license templates.

    Args:
        custom (Mapping[str, str] | None): Custom templates, name → raw text.
        config_path (Path | None): Config file that custom-template edits are
            written back to; None keeps edits in memory only.
    """

    def __init__(
        self,
        custom: Mapping[str, str] | None = None,
        *,
        config_path: Path | None = None,
    ) -> None:
        self._custom: dict[str, str] = dict(custom or {})
        self._builtin: dict[str, Traversable] = _builtin_resources()
        self._cache: dict[str, str] = {}
        self.config_path: Path | None = config_path

    @classmethod
    def from_config(cls, config: Config, *, config_path: Path | None = None) -> TemplateStore:
        """Build a store from the custom templates of ``config``.

        When ``config_path`` is omitted, the last config file ``config`` was
        loaded from is used for persistence.
        """
        if config_path is None and config.config_files:
            config_path = config.config_files[-1]
        return cls(config.templates, config_path=config_path)

    # ------------------------------ Queries ------------------------------

    def builtin_names(self) -> list[str]:
        """Return the sorted names of the bundled templates."""
        return sorted(self._builtin)

    def custom_names(self) -> list[str]:
        """Return the custom template names, in configuration order."""
        return list(self._custom)

    @property
    def custom_templates(self) -> Mapping[str, str]:
        """Read-only view of the custom templates."""
        return MappingProxyType(self._custom)

    def available_licenses(self) -> list[str]:
        """Return built-in names followed by custom names not shadowing a built-in."""
        builtin: list[str] = self.builtin_names()
        return builtin + [name for name in self._custom if name.lower() not in self._builtin]

    def is_builtin(self, name: str) -> bool:
        """Return True if ``name`` is a bundled license."""
        return name.lower() in self._builtin

    def get_template(self, name: str) -> LicenseTemplate | None:
        """Return the template called ``name``, or None if there is none.

        Custom templates win over built-ins; built-in lookup ignores case.
        """
        if name in self._custom:
            return LicenseTemplate(name=name, content=self._custom[name])

        key: str = name.lower()
        resource: Traversable | None = self._builtin.get(key)
        if resource is None:
            logger.debug("No template named '%s'", name)
            return None
        if key not in self._cache:
            self._cache[key] = resource.read_text(encoding="utf-8")
        return LicenseTemplate(name=key, content=self._cache[key], builtin=True)

    # ------------------------------ Editing ------------------------------

    def create_custom(self, name: str, content: str) -> LicenseTemplate:
        """Add a new custom template.

        Raises:
            ValueError: If the name is empty or already taken, or the content is empty.
        """
        name = name.strip()
        if not name:
            raise ValueError("Template name must not be empty")
        if name in self._custom or self.is_builtin(name):
            raise ValueError(f"Template '{name}' already exists")
        if not content.strip():
            raise ValueError(f"Template '{name}' has no content")
        self._custom[name] = content
        logger.info("Created custom template '%s'", name)
        self._persist()
        return LicenseTemplate(name=name, content=content)

    def update_custom(self, name: str, content: str) -> LicenseTemplate:
        """Replace the content of an existing custom template.

        Raises:
            KeyError: If there is no custom template called ``name``.
            ValueError: If the content is empty.
        """
        if name not in self._custom:
            raise KeyError(name)
        if not content.strip():
            raise ValueError(f"Template '{name}' has no content")
        self._custom[name] = content
        logger.info("Updated custom template '%s'", name)
        self._persist()
        return LicenseTemplate(name=name, content=content)

    def delete_custom(self, name: str) -> None:
        """Remove a custom template.

        Raises:
            KeyError: If there is no custom template called ``name``.
        """
        del self._custom[name]
        logger.info("Deleted custom template '%s'", name)
        self._persist()

    def _persist(self) -> None:
        if self.config_path is None:
            return
        write_toml_table(self.config_path, {Toml.SECTION_TEMPLATES: dict(self._custom)})
