# topmark:header:start
#
#   project      : Lintframe
#   file         : __main__.py
#   file_relpath : src/lintframe/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Lintframe via ``python -m lintframe``.

Equivalent to running the ``lintframe`` console script; it delegates directly to
:func:`lintframe.cli.main.cli`.

Examples:
    Render a report using the module interface::

        python -m lintframe render report.json
"""

from __future__ import annotations

from lintframe.cli.main import cli

if __name__ == "__main__":
    cli()
