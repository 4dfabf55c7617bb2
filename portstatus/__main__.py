"""Allow ``python -m portstatus``."""

from portstatus.cli import main

if __name__ == "__main__":
    main()
