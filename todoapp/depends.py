from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from todoapp.adapter.services.password_hasher import BcryptPasswordHasher
from todoapp.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from todoapp.adapter.session_store.memory_session_store import InMemorySessionStore
from todoapp.adapter.session_store.redis_session_store import RedisSessionStore
from todoapp.api.error import to_http_error
from todoapp.api.utils.jwt import JwtTokenService
from todoapp.app.services.password_hasher import IPasswordHasher
from todoapp.app.services.session_store import ISessionStore
from todoapp.app.services.token_service import ITokenService
from todoapp.app.use_cases.auth import AuthenticateUseCase, AuthenticatedUser

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

redis_client = Redis.from_url(
    ApplicationConfig.REDIS_URL,
    password=ApplicationConfig.REDIS_PASSWORD,
    decode_responses=True,
)

# Process-wide collaborators, built once from config
token_service = JwtTokenService(
    secret=ApplicationConfig.JWT_SECRET,
    lifetime_hours=ApplicationConfig.JWT_ACCESS_TOKEN_EXP_HOUR,
    issuer=ApplicationConfig.JWT_ISSUER,
)
password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)

if ApplicationConfig.CACHE_BACKEND == "memory":
    session_store: ISessionStore = InMemorySessionStore()
else:
    session_store = RedisSessionStore(redis_client)

# Missing or empty bearer yields None instead of FastAPI's own 403
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_session_store() -> ISessionStore:
    return session_store


def get_token_service() -> ITokenService:
    return token_service


def get_password_hasher() -> IPasswordHasher:
    return password_hasher


def get_session_ttl_seconds() -> int:
    return ApplicationConfig.JWT_ACCESS_TOKEN_EXP_HOUR * 3600


def get_session_id(request: Request) -> Optional[str]:
    """Session id from the session cookie"""
    return request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session_id: Optional[str] = Depends(get_session_id),
    tokens: ITokenService = Depends(get_token_service),
    sessions: ISessionStore = Depends(get_session_store),
) -> AuthenticatedUser:
    """
    Dependency that authenticates the request.

    The bearer token must be valid AND bound to the live session named by
    the session cookie.

    Raises:
        ClientError: 401 for any authentication failure (same body for all causes)
        ServerError: 500 if the session store is unreachable
    """
    token = credentials.credentials if credentials else None

    use_case = AuthenticateUseCase(tokens, sessions)
    result = await use_case.execute(token, session_id)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
