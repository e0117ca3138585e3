"""
pytest conftest.py: adds the project root to sys.path so that all
modules can be imported as absolute packages (e.g. `from corruption.engine import ...`)
regardless of how pytest is invoked.
"""
import sys
import os

# Insert the project root directory at the front of sys.path
_PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)
