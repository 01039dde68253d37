"""Command-line interface. Run with: python -m galaxygenerator"""
import sys

from galaxygenerator.main import main

if __name__ == "__main__":
    sys.exit(main())
