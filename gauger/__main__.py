"""
Gauger Module Entry Point
==========================

Allows running the Gauger CLI via: python -m gauger
"""

from gauger.cli import main

if __name__ == "__main__":
    main()
