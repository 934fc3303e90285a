"""Enables running: python -m omnizm"""

from omnizm.cli.cli import main

if __name__ == "__main__":
    main()
