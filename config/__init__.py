"""Configuration package exposing settings modules for the flow LLM adapter."""

from config import llm

__all__ = ["llm"]
