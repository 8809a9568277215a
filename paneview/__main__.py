"""Module entrypoint for ``python -m paneview``.

Argument parsing and runtime setup happen in ``paneview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
