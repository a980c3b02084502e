"""
Interactive key-value shell.

Line-oriented REPL that tokenizes commands with shell-like quoting,
validates them against a fixed command registry and runs them against
an ordered key-value store.
"""

__version__ = "0.1.0"
