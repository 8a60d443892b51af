"""Entry point for `python -m explot`."""

from explot import cli


if __name__ == "__main__":
    cli.main()
