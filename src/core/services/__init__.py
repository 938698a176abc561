"""Core services.

Why:
- Input resolution and generation live here, away from the terminal, so both
  are plain functions of their input.
"""
