"""
Prompt features for FootyCast.

- `formatting` projects standings and fixtures into prompt-ready text.
- `prompt_builder` wraps them in the fixed prediction instructions.
"""
