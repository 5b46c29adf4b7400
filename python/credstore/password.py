"""Random password generation."""
import secrets
import string

ALPHABET = string.ascii_letters + string.digits
DEFAULT_LENGTH = 30


def generate_password(length: int = DEFAULT_LENGTH) -> str:
    """Return ``length`` characters drawn from the alphanumeric alphabet."""
    if length < 1:
        raise ValueError("Password length should be at least 1.")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))
