"""Allow ``python -m postman_route``."""

from postman_route.cli import main

if __name__ == "__main__":
    main()
