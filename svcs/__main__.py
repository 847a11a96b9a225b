"""Allow ``python -m svcs``."""

from svcs.cli import main

if __name__ == "__main__":
    main()
