"""Module entrypoint for ``python -m cli2text``.

All argument parsing and report setup happen in ``cli2text.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
