"""Password hashing service using bcrypt.

An opaque hash/verify capability. Strength rules live in the domain
(``todolist.domain.user.value_objects.password``) so that every call site
applies the same policy.
"""

import base64
import hashlib

import bcrypt

# Hashed in place of a real digest when no user matches, so a miss costs
# the same bcrypt work as a wrong password
_DUMMY_PASSWORD = "todolist-dummy-password"


def _prehash(password: str) -> bytes:
    """Reduce any password to 44 ASCII bytes.

    bcrypt only reads the first 72 bytes of its input; digesting first
    keeps every character of a long password significant.
    """
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use the minimum (4) to stay fast.
        """
        self._rounds = rounds
        self._dummy_hash: bytes | None = None

    def hash(self, password: str) -> str:
        """Hash a plaintext password and return the bcrypt digest."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(_prehash(password), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Returns
        -------
        True if password matches, False otherwise (including malformed hashes)
        """
        try:
            return bcrypt.checkpw(
                _prehash(password),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def verify_dummy(self, password: str) -> None:
        """Spend one verification's worth of work on a known-bad hash.

        Called when no account matches, so an unknown email takes as long
        to reject as a wrong password.
        """
        if self._dummy_hash is None:
            salt = bcrypt.gensalt(rounds=self._rounds)
            self._dummy_hash = bcrypt.hashpw(_prehash(_DUMMY_PASSWORD), salt)
        bcrypt.checkpw(_prehash(password), self._dummy_hash)

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was produced with a different work factor."""
        try:
            # bcrypt format: $2b$XX$...
            parts = password_hash.split("$")
            if len(parts) >= 3:
                return int(parts[2]) != self._rounds
        except (ValueError, IndexError):
            pass
        return True
