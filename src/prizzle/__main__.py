"""Allow ``python -m prizzle``."""

from prizzle.cli import main

if __name__ == "__main__":
    main()
