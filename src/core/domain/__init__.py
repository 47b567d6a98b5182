"""Domain models and pure helpers.

Plain data structures (Pydantic v2) and input validators; nothing here knows
about HTTP or the terminal.
"""
