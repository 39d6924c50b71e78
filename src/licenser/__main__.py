# licenser:header:start
#
#   project      : Licenser
#   file         : __main__.py
#   file_relpath : src/licenser/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Module entry point for running Licenser via ``python -m licenser``.

Delegates to :func:`licenser.cli.main.cli`, the single authoritative CLI entry
point.
"""

from __future__ import annotations

from licenser.cli.main import cli

if __name__ == "__main__":
    cli()
