# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""License correction engine: auto-save controller, service and host adapters."""

from __future__ import annotations

from licenser.engine.controller import AutoSaveController
from licenser.engine.files import FileDocument, FileWorkspace
from licenser.engine.host import DocumentHost, SaveEvent, SettingsSource, Workspace
from licenser.engine.service import LicenseService
from licenser.engine.settings import ConfigSettings
from licenser.engine.state import ControllerPhase, CorrectionState, SaveOutcome

__all__ = [
    "AutoSaveController",
    "ConfigSettings",
    "ControllerPhase",
    "CorrectionState",
    "DocumentHost",
    "FileDocument",
    "FileWorkspace",
    "LicenseService",
    "SaveEvent",
    "SaveOutcome",
    "SettingsSource",
    "Workspace",
]
