from yachtcash.core.security.passwords import PasswordHashError, hash_password, verify_password

__all__ = ["PasswordHashError", "hash_password", "verify_password"]
