"""
Permission levels of a client.

Classes derived from :class:`Scope` represent a particular permission level.
Currently there are only two distinct levels:

* :class:`Unauthenticated` – no credential, only a small subset of the
  endpoints may be called,
* :class:`Authenticated` – the client holds an access token and may call
  every endpoint.

For a client, a higher access level allows it to access more endpoints.
For an endpoint, a higher access level prevents it from being accessed by
more clients.

The scopes are not related by inheritance.  Instead, every scope declares
from which other scopes it can be built with :meth:`Scope.from_scope`; the
only conversion besides the identity is ``Authenticated -> Unauthenticated``.
Python has no way to reject such a call while type checking, so the query
functions call :func:`narrow_scope` before a request is built and fail with
:class:`InsufficientScopeError` instead of sending a request that would end
with ``401``.
"""

import abc
from dataclasses import dataclass, field
from typing import Dict, Type, TypeVar

from traduora_lib.exceptions import AuthError, InsufficientScopeError

S = TypeVar("S", bound="Scope")

AUTHORIZATION_HEADER = "Authorization"


class Scope(abc.ABC):
    """Determines the permissions of a client."""

    @abc.abstractmethod
    def set_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """
        Add the appropriate header to a set of headers.

        Depending on the scope this adds either nothing or the
        ``Authorization`` header.

        Raises
        ------
        AuthError
            If the token cannot be used as a header value.
        """

    @classmethod
    @abc.abstractmethod
    def from_scope(cls: Type[S], scope: "Scope") -> S:
        """
        Convert ``scope`` into an instance of this scope class.

        Raises
        ------
        InsufficientScopeError
            If ``scope`` grants less than this scope requires.
        """

    def narrow(self, target: Type[S]) -> S:
        """Express this scope as ``target``, see :func:`narrow_scope`."""
        return target.from_scope(self)


class Unauthenticated(Scope):
    """
    Client is not authenticated.

    An endpoint with this scope can be queried without authentication.
    """

    def set_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        return headers

    @classmethod
    def from_scope(cls, scope: Scope) -> "Unauthenticated":
        # Every scope may be downgraded to the unauthenticated one.
        if isinstance(scope, (Unauthenticated, Authenticated)):
            return cls()
        raise InsufficientScopeError(
            f"cannot convert {type(scope).__name__} to {cls.__name__}"
        )

    def __eq__(self, other):
        return isinstance(other, Unauthenticated)

    def __hash__(self):
        return hash(Unauthenticated)

    def __repr__(self):
        return "Unauthenticated()"


@dataclass(frozen=True)
class Authenticated(Scope):
    """
    Client is authenticated and has an access token.

    This allows calling all endpoints, including those that need
    authorization.  The token never shows up in ``repr``.
    """

    token: str = field(repr=False)

    def set_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        value = f"Bearer {self.token}"
        _validate_header_value(value)
        headers[AUTHORIZATION_HEADER] = value
        return headers

    @classmethod
    def from_scope(cls, scope: Scope) -> "Authenticated":
        if isinstance(scope, Authenticated):
            return scope
        raise InsufficientScopeError(
            f"endpoint requires {cls.__name__} scope, "
            f"but the client is {type(scope).__name__}"
        )

    @classmethod
    def from_access_token(cls, access_token) -> "Authenticated":
        """Build the scope from an ``AccessToken`` model returned by login."""
        return cls(token=access_token.access_token)


def _validate_header_value(value: str) -> None:
    for position, char in enumerate(value):
        code = ord(char)
        if char != "\t" and not 0x20 <= code < 0x7F:
            raise AuthError(
                f"invalid character {char!r} at position {position} "
                f"of the authorization header"
            )


def can_narrow(scope: Scope, target: Type[Scope]) -> bool:
    try:
        target.from_scope(scope)
    except InsufficientScopeError:
        return False
    return True


def narrow_scope(scope: Scope, target: Type[S]) -> S:
    """
    Convert the scope of a client into the scope an endpoint requires.

    Parameters
    ----------
    scope : Scope
        The access level held by the client.
    target : Type[Scope]
        The access level the endpoint declares in ``access_control``.

    Returns
    -------
    Scope
        ``scope`` expressed as ``target``.

    Raises
    ------
    InsufficientScopeError
        If the client is not allowed to call the endpoint.
    """
    return target.from_scope(scope)
