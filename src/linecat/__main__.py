# topmark:header:start
#
#   project      : LineCat
#   file         : __main__.py
#   file_relpath : src/linecat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LineCat via ``python -m linecat``.

It delegates directly to :func:`linecat.cli.main.cli`, so the module interface
and the ``linecat`` console script behave identically.

Examples:
    Number the lines of two files::

        python -m linecat -n a.txt b.txt
"""

from __future__ import annotations

from linecat.cli.main import cli

if __name__ == "__main__":
    cli()
