from enum import Enum


class Role(str, Enum):
    """Resolved identity role carried in the session token.

    Ordered by privilege: user < admin < superuser. The superuser implies
    admin privileges but is a distinct identity.
    """

    USER = "user"
    ADMIN = "admin"
    SUPERUSER = "superuser"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def satisfies(self, required: "Role") -> bool:
        return self.rank >= required.rank

    @property
    def is_admin(self) -> bool:
        return self.satisfies(Role.ADMIN)


_RANKS = {Role.USER: 0, Role.ADMIN: 1, Role.SUPERUSER: 2}
