"""Allow ``python -m fleet_cli``."""

from fleet_cli.cli.main import main

if __name__ == "__main__":
    main()
