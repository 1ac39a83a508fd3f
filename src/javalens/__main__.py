"""
javalens package entry point.

Allows running javalens as a module:
    python -m javalens
"""

from javalens.cli import main

if __name__ == "__main__":
    main()
