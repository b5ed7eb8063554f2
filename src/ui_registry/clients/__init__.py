"""
Client modules for registry communication
"""

from .registry import RegistryFetcher

__all__ = ["RegistryFetcher"]
