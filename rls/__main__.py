"""Module entrypoint for ``python -m rls``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing happens in ``rls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
