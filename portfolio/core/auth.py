from dataclasses import dataclass
from typing import Optional

from ..models.user import User
from ..utils.exceptions import UnauthorizedError

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class AuthContext:
    """
    The caller's identity for one request. Handlers receive it explicitly;
    `principal` is None for anonymous callers.
    """
    principal: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None

    def require_admin(self) -> User:
        if not self.is_authenticated or self.principal.role != ADMIN_ROLE:
            raise UnauthorizedError()
        return self.principal


ANONYMOUS = AuthContext()
