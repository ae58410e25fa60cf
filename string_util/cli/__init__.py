"""Command-line interface for String Util."""
