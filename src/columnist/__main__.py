"""Allow `python -m columnist`."""

from columnist.cli.main import main

if __name__ == "__main__":
    main()
