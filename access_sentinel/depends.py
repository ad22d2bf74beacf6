from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from access_sentinel.adapter.services.euclidean_embedding_matcher import EuclideanEmbeddingMatcher
from access_sentinel.adapter.services.pyotp_totp_provider import PyOtpTotpProvider
from access_sentinel.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from access_sentinel.api.utils.jwt import verify_jwt
from access_sentinel.app.services.account_locks import AccountLocks
from access_sentinel.app.services.clock import Clock, SystemClock
from access_sentinel.app.services.root_admin import RootAdminSettings


def enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    """
    Let SQLAlchemy own BEGIN so SAVEPOINT works on pysqlite-based drivers.

    Transactions start with BEGIN IMMEDIATE: writers queue on the busy
    timeout at begin instead of failing on a SHARED to RESERVED upgrade.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
enable_sqlite_savepoints(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

# Process-wide collaborators
_clock = SystemClock(ApplicationConfig.TIMEZONE)
_account_locks = AccountLocks()
_totp_provider = PyOtpTotpProvider()
_embedding_matcher = EuclideanEmbeddingMatcher(ApplicationConfig.FACE_MATCH_THRESHOLD)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_clock() -> Clock:
    return _clock


def get_account_locks() -> AccountLocks:
    return _account_locks


def get_totp_provider() -> PyOtpTotpProvider:
    return _totp_provider


def get_embedding_matcher() -> EuclideanEmbeddingMatcher:
    return _embedding_matcher


def get_root_admin_settings() -> RootAdminSettings:
    return RootAdminSettings(
        email=ApplicationConfig.ROOT_ADMIN_EMAIL,
        password=ApplicationConfig.ROOT_ADMIN_PASSWORD,
        name=ApplicationConfig.ROOT_ADMIN_NAME,
        bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS,
    )


async def get_current_account(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing account_id and role

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "account_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload
