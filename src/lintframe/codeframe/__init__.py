# topmark:header:start
#
#   project      : Lintframe
#   file         : __init__.py
#   file_relpath : src/lintframe/codeframe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source excerpts for lint messages.

Resolves structural (JSON-pointer) locations to line/column positions and
renders the highlighted source excerpt shown under each message.
"""

from __future__ import annotations
