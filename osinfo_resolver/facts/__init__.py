"""
Facts module: loading and serving inspection facts for resolution.
"""

from .loader import FactsLoader
from .provider import FactsProvider, MappingFactsProvider

__all__ = ['FactsLoader', 'FactsProvider', 'MappingFactsProvider']
