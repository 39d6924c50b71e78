# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/header/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Header extraction, license classification and drift detection."""

from __future__ import annotations

from licenser.header.classifier import Classification, LicenseClassifier
from licenser.header.drift import edit_distance, has_drift, normalize
from licenser.header.extractor import (
    ExtractedHeader,
    extract,
    split_lines,
    strip_comment_markers,
)

__all__ = [
    "Classification",
    "ExtractedHeader",
    "LicenseClassifier",
    "edit_distance",
    "extract",
    "has_drift",
    "normalize",
    "split_lines",
    "strip_comment_markers",
]
