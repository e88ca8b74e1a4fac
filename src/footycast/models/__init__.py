"""
Prediction step for FootyCast.

- `gemini_client` sends the prompt to the generative model and validates the
  returned JSON.
- `sink` writes the validated predictions to disk.
"""
