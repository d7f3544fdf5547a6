"""Run with: python -m roulettecurves"""
import sys

from roulettecurves.main import main

if __name__ == "__main__":
    sys.exit(main())
