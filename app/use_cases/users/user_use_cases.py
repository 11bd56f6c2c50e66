import hashlib
import hmac
import logging
import re
import secrets
from typing import Optional
from app.domain.entities.user import User
from app.domain.errors import UserExistsError, UserValidationError
from app.domain.repositories_interfaces.user_repo import UserRepoInterface


logger = logging.getLogger('use_cases')

MIN_PASSWORD_LENGTH = 6
HASH_ITERATIONS = 100_000


def validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise UserValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters long')
    if not (re.search(r'[a-zA-Z]', password) and re.search(r'[0-9]', password)
            and re.search(r'[^a-zA-Z0-9]', password)):
        raise UserValidationError(
            'Password must contain at least one letter, one number, and one non-alphanumeric character'
        )


def require_text(*values) -> None:
    # Bodies may be arbitrary JSON, only strings are usable as credentials
    if not all(value is None or isinstance(value, str) for value in values):
        raise UserValidationError('Fields must be text')


def hash_password(password: str, salt: str = None) -> str:
    """
    Hashes a password with PBKDF2-SHA256.

    :param password: Plain text password.
    :param salt: Hex salt, a new random one is generated when omitted.
    :return: String of the form "<salt>$<hex digest>".
    """
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac('sha256', password.encode(), bytes.fromhex(salt), HASH_ITERATIONS)
    return f'{salt}${digest.hex()}'


def verify_password(password: str, password_hash: str) -> bool:
    salt, separator, _ = password_hash.partition('$')
    if not separator:
        return False
    return hmac.compare_digest(hash_password(password, salt), password_hash)


class UserUseCases:
    def __init__(self, repo: UserRepoInterface):
        self.repo = repo

    async def register(self, username: str, password: str, display_name: str, avatar_url: str) -> User:
        """
        Registers a new user.

        :return: The stored User instance.
        :raises UserValidationError: If a field is missing or the password is too weak.
        :raises UserExistsError: If the username is taken.
        """
        require_text(username, password, display_name, avatar_url)
        if not (username and password and display_name and avatar_url):
            raise UserValidationError('All fields are required')
        validate_password(password)
        if await self.repo.get(username):
            raise UserExistsError('Username already exists')
        user = User(
            username=username,
            display_name=display_name,
            avatar_url=avatar_url,
            password_hash=hash_password(password),
        )
        await self.repo.save(user)
        logger.info("User registered", extra={'user': username})
        return user

    async def login(self, username: str, password: str) -> Optional[User]:
        require_text(username, password)
        if not (username and password):
            raise UserValidationError('Username and password are required')
        user = await self.repo.get(username)
        if user and user.password_hash and verify_password(password, user.password_hash):
            logger.info("User logged in", extra={'user': username})
            return user
        logger.info("Rejected login", extra={'user': username})
        return None

    async def get_all(self) -> list[User]:
        return await self.repo.get_all()
