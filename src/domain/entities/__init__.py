"""
Fitness Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import TokenScope

# Export all entities
from .user import User
from .token import Token
from .permission import Permission, UserPermission
from .fitness_record import FitnessRecord

__all__ = [
    # Enums
    "TokenScope",
    # Entities
    "User",
    "Token",
    "Permission",
    "UserPermission",
    "FitnessRecord",
]
