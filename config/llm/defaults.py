"""
Shared constants for LLM completion calls
"""

# Fixed for every completion call; near-zero keeps completions reproducible.
COMPLETION_TEMPERATURE = 0.000001

DEFAULT_TIMEOUT_SECONDS = 360  # LLMs need longer timeouts
