"""
Token Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime

from pydantic import BaseModel


class AuthenticationTokenInfo(BaseModel):
    """Plaintext token, shown exactly once"""

    token: str
    expiry: datetime


class AuthenticationTokenResponse(BaseModel):
    """Response for create authentication token use case"""

    authentication_token: AuthenticationTokenInfo
