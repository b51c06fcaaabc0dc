"""
Base module class for all lookup modules.
Each module defines its metadata and implements the query/normalize pattern.
"""
from typing import Dict, Any, Optional, Set
from abc import ABC, abstractmethod
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class InputType(Enum):
    """Kinds of lookup target"""
    IP = "IP"
    DOMAIN = "Domain"


class BaseModule(ABC):
    """
    Base class for all lookup modules.
    Each module should inherit from this and define its configuration.

    Modules are self-contained:
    - Query logic in query.py
    - Normalization in normalizer.py
    - Module class and instance in __init__.py
    """

    # Module metadata - must be defined by subclasses
    MODULE_NAME: str = ""
    INPUT_TYPES: Set[InputType] = set()
    DATA_KEY: str = ""  # Key used in the normalized result dict

    @abstractmethod
    async def query(self, observable: str, **kwargs) -> Optional[Dict[str, Any]]:
        """
        Run the lookup.

        Args:
            observable: The domain or IP literal to look up
            **kwargs: Module-specific parameters (resolver address, timeout)

        Returns:
            Raw result data (will be normalized later)
        """
        pass

    @abstractmethod
    def normalize(self, raw_result: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Normalize the raw result into a standardized format.

        Args:
            raw_result: Raw result from query()

        Returns:
            Normalized dict with consistent structure: {DATA_KEY: {...}}
        """
        pass

    def validate_input(self, observable: str, input_type: InputType) -> bool:
        """Check whether this module can process the given input type"""
        return input_type in self.INPUT_TYPES

