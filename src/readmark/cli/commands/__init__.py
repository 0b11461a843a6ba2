# topmark:header:start
#
#   project      : ReadMark
#   file         : __init__.py
#   file_relpath : src/readmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ReadMark CLI subcommands."""
