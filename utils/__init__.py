"""Utility subpackages exposed for convenient importing."""

from utils import logging

__all__ = ["logging"]
