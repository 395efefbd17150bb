"""
Auth Service

Admin sign-in against the configured email and bcrypt password hash. A
successful login issues a signed, time-limited session token carrying the
admin email.
"""

from typing import Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext
from pydantic import BaseModel

from portfolio_cms.core.config import settings
from portfolio_cms.core.error_codes import AuthErrorCode
from portfolio_cms.core.exceptions import AuthException
from portfolio_cms.core.logger import get_logger

logger = get_logger(__name__)

TOKEN_SALT = "portfolio-cms-session"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """True when ``plain_password`` matches; a malformed hash never matches."""
    try:
        return bool(pwd_context.verify(plain_password, hashed_password))
    except (ValueError, TypeError) as e:
        logger.error("Error verifying password: %s", e)
        return False


class AuthUser(BaseModel):
    email: str


class AuthSession(BaseModel):
    """Signed-in admin session."""

    user: AuthUser
    token: Optional[str] = None
    expires_in: int


class AuthService:
    """Issues and verifies admin session tokens."""

    def __init__(
        self,
        admin_email: Optional[str] = None,
        admin_password_hash: Optional[str] = None,
        secret_key: Optional[str] = None,
        max_age: Optional[int] = None,
    ) -> None:
        self.admin_email = admin_email or settings.auth__admin_email
        if admin_password_hash is None and settings.auth__admin_password_hash:
            admin_password_hash = settings.auth__admin_password_hash.get_secret_value()
        self.admin_password_hash = admin_password_hash
        self.max_age = max_age or settings.auth__token_max_age
        self.serializer = URLSafeTimedSerializer(
            secret_key or settings.auth__secret_key.get_secret_value()
        )

    def login(self, email: str, password: str) -> AuthSession:
        """
        Check credentials and open a session.

        Raises:
            AuthException: If the email or password does not match
        """
        email_ok = email.strip().lower() == self.admin_email.lower()
        if email_ok and self.admin_password_hash:
            password_ok = verify_password(password, self.admin_password_hash)
        else:
            # Same bcrypt cost whether or not the email matched
            pwd_context.dummy_verify()
            password_ok = False
        if not password_ok:
            logger.warning("Failed admin login for %s", email)
            raise AuthException(
                "Invalid email or password", AuthErrorCode.INVALID_CREDENTIALS
            )

        token = self.serializer.dumps({"email": self.admin_email}, salt=TOKEN_SALT)
        logger.info("Admin %s signed in", self.admin_email)
        return AuthSession(
            user=AuthUser(email=self.admin_email),
            token=token,
            expires_in=self.max_age,
        )

    def resolve_session(self, token: Optional[str]) -> AuthSession:
        """
        Session carried by ``token``.

        Raises:
            AuthException: If the token is missing, tampered with or expired
        """
        if not token:
            raise AuthException("Not signed in", AuthErrorCode.NOT_AUTHENTICATED)
        try:
            data = self.serializer.loads(token, salt=TOKEN_SALT, max_age=self.max_age)
        except SignatureExpired as e:
            raise AuthException(
                "Session expired", AuthErrorCode.TOKEN_EXPIRED, cause=e
            ) from e
        except BadSignature as e:
            raise AuthException(
                "Invalid session token", AuthErrorCode.TOKEN_INVALID, cause=e
            ) from e

        email = data.get("email") if isinstance(data, dict) else None
        if not email:
            raise AuthException("Invalid session token", AuthErrorCode.TOKEN_INVALID)
        return AuthSession(user=AuthUser(email=email), expires_in=self.max_age)


_auth_service: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service


__all__ = [
    "AuthService",
    "AuthSession",
    "AuthUser",
    "get_auth_service",
    "hash_password",
    "verify_password",
]
