from .authentication import AuthenticationService
from .notes import NotesService
from .password_hashing import BcryptPasswordHasher
from .token_issuer import JwtTokenIssuer

__all__ = [
    "AuthenticationService",
    "BcryptPasswordHasher",
    "JwtTokenIssuer",
    "NotesService",
]
