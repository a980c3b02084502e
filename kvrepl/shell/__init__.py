"""
Interactive Shell.

Tokenizer, command registry, dispatcher, handlers and the session loop.
"""
