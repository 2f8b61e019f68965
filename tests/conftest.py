"""Pytest configuration for the health monitor metrics test suite."""
import sys
from pathlib import Path

# Ensure project modules are importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
