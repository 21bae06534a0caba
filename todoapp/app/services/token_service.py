from abc import ABC, abstractmethod

from pydantic import BaseModel

from libs.result import Result


class TokenClaims(BaseModel):
    """Claims carried by an access token"""

    subject: str
    session_id: str


class ITokenService(ABC):
    """Issues and validates signed access tokens"""

    @abstractmethod
    def mint(self, subject: str, session_id: str) -> str:
        """Sign a token for subject bound to session_id"""
        pass

    @abstractmethod
    def validate(self, token: str) -> Result[TokenClaims]:
        """Check signature and expiry. Errors: TOKEN_INVALID, TOKEN_EXPIRED"""
        pass
