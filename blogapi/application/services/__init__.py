from .password_hashing import WerkzeugPasswordHasher
from .token_service import TokenService

__all__ = ["TokenService", "WerkzeugPasswordHasher"]
