"""Executable entrypoint for `python -m sharedconf`.

Delegates directly to :func:`sharedconf.cli.main`.
"""

from sharedconf.cli import main

if __name__ == "__main__":
    main()
