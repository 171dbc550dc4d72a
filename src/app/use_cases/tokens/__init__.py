"""
Token Use Cases

Issuing authentication and activation tokens.
"""

from .create_authentication_token_use_case import CreateAuthenticationTokenUseCase
from .create_activation_token_use_case import CreateActivationTokenUseCase
from .dtos import AuthenticationTokenInfo, AuthenticationTokenResponse

__all__ = [
    # Use Cases
    "CreateAuthenticationTokenUseCase",
    "CreateActivationTokenUseCase",
    # DTOs
    "AuthenticationTokenResponse",
    "AuthenticationTokenInfo",
]
