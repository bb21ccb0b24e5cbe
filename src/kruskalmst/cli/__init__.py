"""Command-line interface for kruskalmst."""
