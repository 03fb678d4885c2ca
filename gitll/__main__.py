"""Module entrypoint for ``python -m gitll``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and listing happen in ``gitll.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
