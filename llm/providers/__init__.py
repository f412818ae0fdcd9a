"""Concrete LLM provider implementations; importing a module registers its types."""
