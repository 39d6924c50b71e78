# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Licenser CLI subcommands."""
