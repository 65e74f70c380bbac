from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Role


class UserRoleRepository(Protocol):
    """Read side of the `user_roles` collection kept by the auth backend."""

    def list_user_ids_by_role(self, role: Role) -> Sequence[str]:
        raise NotImplementedError
