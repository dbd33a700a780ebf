"""Module entrypoint for ``python -m panecmd``."""

from .cli import main


if __name__ == "__main__":
    main()
