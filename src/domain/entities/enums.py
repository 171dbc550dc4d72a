"""
Fitness Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TokenScope(str, Enum):
    """Purpose a token was minted for"""

    activation = "activation"
    authentication = "authentication"
