"""Authentication domain service."""

import logfire

from blog.domain.error import AuthenticationError, ValidationError
from blog.domain.model import Identity
from blog.domain.repository import IdentityProvider
from blog.domain.value import PASSWORD_MIN_LENGTH
from blog.util.password import hash_password, verify_password

from .base import Service
from .user_service import normalize_username


class AuthService(Service):
    """Domain service for registration and password login.

    Token issuance lives in JWTService; this service only establishes who
    the user is.
    """

    def __init__(
        self, identity_provider: IdentityProvider, password_hash_rounds: int = 12
    ) -> None:
        """Initialize auth service.

        Args:
            identity_provider: Identity provider holding user records
            password_hash_rounds: bcrypt cost factor for new passwords
        """
        self.identity_provider = identity_provider
        self.password_hash_rounds = password_hash_rounds

    async def register(self, username: str, email: str, password: str) -> Identity:
        """Register a new user.

        Args:
            username: Public display name (unique)
            email: Login email (unique, case-insensitive)
            password: Plain text password

        Returns:
            The new identity

        Raises:
            ValidationError: If a field is invalid, or the username or email
                is already registered
        """
        with logfire.span("auth_service.register"):
            clean_username = normalize_username(username)
            clean_email = email.strip().lower()
            if "@" not in clean_email:
                raise ValidationError("Email must be a valid address")
            if len(password) < PASSWORD_MIN_LENGTH:
                raise ValidationError(
                    f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
                )

            if await self.identity_provider.find_by_email(clean_email):
                raise ValidationError("Email is already registered")
            if await self.identity_provider.find_by_username(clean_username.root):
                raise ValidationError("Username is already taken")

            identity = await self.identity_provider.save(
                Identity(
                    id=await self.identity_provider.next_id(),
                    username=clean_username,
                    email=clean_email,
                    password_hash=hash_password(password, self.password_hash_rounds),
                )
            )

            logfire.info("User registered", user_id=identity.id)
            return identity

    async def login(self, email: str, password: str) -> Identity:
        """Check an email and password pair.

        Raises:
            AuthenticationError: If no user matches the credentials
        """
        with logfire.span("auth_service.login"):
            identity = await self.identity_provider.find_by_email(email.strip())
            if (
                identity is None
                or identity.password_hash is None
                or not verify_password(password, identity.password_hash)
            ):
                logfire.warn("Login rejected")
                raise AuthenticationError("Invalid email or password")

            logfire.info("User logged in", user_id=identity.id)
            return identity
