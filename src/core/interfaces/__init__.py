"""Core interfaces.

Why:
- Contracts (Protocol) implemented by concrete adapters.
- Lets the core depend on abstractions, not on pyperclip or the filesystem.
"""
