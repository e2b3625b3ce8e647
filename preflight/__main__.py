"""Allow running as python -m preflight."""

from .cli import main

if __name__ == "__main__":
    main()
