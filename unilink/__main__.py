"""
Package entry point.

Allows running the application via:

    python -m unilink

This simply forwards execution to unilink.cli.main().
"""

from unilink.cli import main

if __name__ == "__main__":
    main()
