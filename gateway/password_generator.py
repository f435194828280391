import secrets
import string

# Unambiguous characters only (no 0/O, 1/l/I)
PASSWORD_ALPHABET = ''.join(
    c for c in string.ascii_letters + string.digits if c not in '0O1lI'
)

DEFAULT_LENGTH = 12


def generate_password(length: int = DEFAULT_LENGTH) -> str:
    """Generate an opaque credential like 'k7HxQ2mPa9Zt'"""
    if length < 1:
        raise ValueError("Password length must be positive")
    return ''.join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
