"""
Core infrastructure.

Configuration, logging and the exception taxonomy shared by the shell
and the storage layer.
"""
