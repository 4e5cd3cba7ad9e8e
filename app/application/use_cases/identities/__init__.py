"""Use cases for identities: signup, sign-in and sign-out."""

from .authenticate import InvalidCredentialsError, authenticate, resolve_auth_context
from .signout import signout
from .signup import SignupResult, signup

__all__ = [
    "InvalidCredentialsError",
    "SignupResult",
    "authenticate",
    "resolve_auth_context",
    "signout",
    "signup",
]
