# licenser:header:start
#
#   project      : Licenser
#   file         : settings.py
#   file_relpath : src/licenser/engine/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""`SettingsSource` backed by a frozen `Config` and a `TemplateStore`.

Hosts that keep settings elsewhere (an editor's settings store) implement the
protocol directly; the CLI and tests use this adapter. Replacing the config
with `ConfigSettings.update` takes effect on the next save event.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from licenser.config.keys import ConfigKey
from licenser.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from licenser.config.logging import LicenserLogger
    from licenser.config.model import Config
    from licenser.templates.model import LicenseTemplate
    from licenser.templates.store import TemplateStore

logger: LicenserLogger = get_logger(__name__)

_GETTERS: dict[str, Callable[[Config], Any]] = {
    ConfigKey.AUTHOR_NAME: lambda c: c.author_name or None,
    ConfigKey.AUTHOR_EMAIL: lambda c: c.author_email or None,
    ConfigKey.YEAR: lambda c: c.year,
    ConfigKey.DEFAULT_LICENSE: lambda c: c.default_license,
    ConfigKey.AUTO_SAVE: lambda c: c.auto_save,
    ConfigKey.AUTO_CORRECT: lambda c: c.auto_correct,
    ConfigKey.COOLDOWN_MS: lambda c: c.cooldown_ms,
    ConfigKey.DEBOUNCE_MS: lambda c: c.debounce_ms,
    ConfigKey.MAX_LINES: lambda c: c.max_lines,
    ConfigKey.FUZZY_THRESHOLD: lambda c: c.fuzzy_threshold,
    ConfigKey.DRIFT_THRESHOLD: lambda c: c.drift_threshold,
    ConfigKey.FALLBACK_PREFIX: lambda c: c.fallback_prefix,
}


class ConfigSettings:
    """Answer `get_config` / `get_template` from a `Config` and a `TemplateStore`."""

    def __init__(self, config: Config, store: TemplateStore) -> None:
        self.config: Config = config
        self.store: TemplateStore = store

    def update(self, config: Config) -> None:
        """Swap in a new configuration snapshot."""
        self.config = config

    def get_config(self, key: str) -> Any:
        getter: Callable[[Config], Any] | None = _GETTERS.get(key)
        if getter is None:
            logger.debug("Unknown config key '%s'", key)
            return None
        return getter(self.config)

    def get_template(self, name: str) -> LicenseTemplate | None:
        return self.store.get_template(name)
