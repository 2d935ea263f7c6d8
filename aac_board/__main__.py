"""Entrypoint for `python -m aac_board`."""

from .cli import main


if __name__ == "__main__":
    main()
