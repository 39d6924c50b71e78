# licenser:header:start
#
#   project      : Licenser
#   file         : __init__.py
#   file_relpath : src/licenser/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Licenser contributors
#
# licenser:header:end

"""Click command line interface for Licenser."""
