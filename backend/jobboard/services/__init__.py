from jobboard.services.auth import (
    hash_password,
    verify_password,
    create_access_token,
    create_user_token,
    decode_access_token,
    extract_token,
)

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "create_user_token",
    "decode_access_token",
    "extract_token",
]
