"""Module entrypoint for ``python -m lsx``.

Argument parsing and rendering happen in ``lsx.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
