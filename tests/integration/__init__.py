"""Integration tests for config-file-reader.

Integration tests validate components against real files on disk:
- The showcase configuration file
- Full reader sessions across several sections

Run with: pytest tests/integration/ -v
Skip: pytest -m "not integration"
"""
