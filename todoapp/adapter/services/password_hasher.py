import bcrypt

from todoapp.app.services.password_hasher import IPasswordHasher

# bcrypt only looks at the first 72 bytes
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(IPasswordHasher):
    """bcrypt with a fixed cost factor (12 unless configured otherwise)"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(self._encode(password), bcrypt.gensalt(self.rounds)).decode("utf-8")

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False
