"""Allow ``python -m themegen``."""

from themegen.cli import main

if __name__ == "__main__":
    main()
