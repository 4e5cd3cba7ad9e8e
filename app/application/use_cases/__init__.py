"""Aggregate application use cases."""

from .identities import authenticate, resolve_auth_context, signout, signup

__all__ = [
    "authenticate",
    "resolve_auth_context",
    "signout",
    "signup",
]
