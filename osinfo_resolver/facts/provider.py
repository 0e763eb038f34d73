"""
Facts providers: sources of per-root OS facts queried by the resolver.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ..exceptions import FactsNotFoundError
from ..models import OsFacts


class FactsProvider(ABC):
    """Abstract source of inspection facts, addressed by root.

    Each getter returns None when the fact is not available for the root.
    """

    @abstractmethod
    def get_type(self, root: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_distro(self, root: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_major_version(self, root: str) -> Optional[int]:
        pass

    @abstractmethod
    def get_minor_version(self, root: str) -> Optional[int]:
        pass

    @abstractmethod
    def get_product_name(self, root: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_product_variant(self, root: str) -> Optional[str]:
        pass

    @abstractmethod
    def get_build_id(self, root: str) -> Optional[str]:
        pass


class MappingFactsProvider(FactsProvider):
    """In-memory provider over already collected facts."""

    def __init__(self, facts: Iterable[OsFacts] = ()):
        self._facts: Dict[str, OsFacts] = {}
        for item in facts:
            self.add(item)

    def add(self, facts: OsFacts) -> None:
        """Register facts under their root."""
        if not facts.root:
            raise ValueError("Facts must carry a root to be registered with a provider")
        self._facts[facts.root] = facts

    def roots(self) -> List[str]:
        return list(self._facts)

    def get_facts(self, root: str) -> OsFacts:
        try:
            return self._facts[root]
        except KeyError:
            raise FactsNotFoundError(root) from None

    def get_type(self, root: str) -> Optional[str]:
        return self.get_facts(root).os_type

    def get_distro(self, root: str) -> Optional[str]:
        return self.get_facts(root).distro

    def get_major_version(self, root: str) -> Optional[int]:
        return self.get_facts(root).major

    def get_minor_version(self, root: str) -> Optional[int]:
        return self.get_facts(root).minor

    def get_product_name(self, root: str) -> Optional[str]:
        return self.get_facts(root).product_name

    def get_product_variant(self, root: str) -> Optional[str]:
        return self.get_facts(root).product_variant

    def get_build_id(self, root: str) -> Optional[str]:
        return self.get_facts(root).build_id
