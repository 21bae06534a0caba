from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt

from libs.result import Error, Result, Return
from todoapp.app.services.token_service import ITokenService, TokenClaims
from todoapp.domain.errors import ErrorCode


class JwtTokenService(ITokenService):
    """
    HS256 access tokens bound to a server-side session.

    The token carries the session id (`sid`) next to the subject so that
    deleting the session invalidates the token before it expires.
    """

    algorithm = "HS256"

    def __init__(self, secret: str, lifetime_hours: int, issuer: str = "todo-api"):
        self.secret = secret
        self.lifetime = timedelta(hours=lifetime_hours)
        self.issuer = issuer

    def mint(self, subject: str, session_id: str) -> str:
        """
        Generate JWT access token

        Args:
            subject: External user UUID as string
            session_id: Server-side session the token is bound to

        Returns:
            JWT token string (HS256)
        """
        now = datetime.now(UTC)
        payload = {
            "sub": subject,
            "sid": session_id,
            "iss": self.issuer,
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def validate(self, token: str) -> Result[TokenClaims]:
        """
        Verify and decode JWT token

        Args:
            token: JWT token string

        Returns:
            Result with TokenClaims, or Error(TOKEN_EXPIRED / TOKEN_INVALID)
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require_sub": True, "require_exp": True, "require_iat": True},
            )
        except ExpiredSignatureError:
            return Return.err(Error(ErrorCode.TOKEN_EXPIRED, "Token has expired"))
        except JWTError:
            return Return.err(Error(ErrorCode.TOKEN_INVALID, "Token is invalid"))

        session_id = payload.get("sid")
        if not isinstance(session_id, str) or not session_id:
            return Return.err(Error(ErrorCode.TOKEN_INVALID, "Token is invalid"))

        return Return.ok(TokenClaims(subject=payload["sub"], session_id=session_id))
