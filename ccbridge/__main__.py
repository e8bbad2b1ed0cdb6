"""Allow running ccbridge as ``python -m ccbridge``."""

from ccbridge.cli.main import main


if __name__ == "__main__":
    main()
