"""Domain models and errors.

Why here:
- Pure, strict data structures (Pydantic v2) shared by CLI and services.
- The domain knows nothing about the clipboard, files or the terminal.
"""
