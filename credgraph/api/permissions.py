from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from credgraph.api.settings import ADMIN_ROLE
from credgraph.api.utils.logger import log_access_denied


@dataclass(frozen=True)
class CallerCredentials:
    """Identity of the caller of a GraphQL request."""

    is_admin: bool = False
    user_id: Optional[str] = None

    def can_read(self, owner_id) -> bool:
        if self.is_admin:
            return True
        # anonymous callers never own anything
        return self.user_id is not None and self.user_id == owner_id

    def to_dict(self) -> dict:
        return {"is_admin": self.is_admin, "user_id": self.user_id}


ANONYMOUS = CallerCredentials()


def caller_from_payload(payload: Optional[dict]) -> CallerCredentials:
    if not payload:
        return ANONYMOUS
    return CallerCredentials(
        is_admin=payload.get("role") == ADMIN_ROLE,
        user_id=payload.get("sub"),
    )


def _owner_id(parent: Dict[str, Any]):
    node = parent.get("__node") or {}
    return node.get("id")


def resolve_credential_field(parent: Dict[str, Any], credentials: CallerCredentials, provider: str):
    """
    Return the stored credential record of provider from a user's credential
    collection, or raise PermissionError if the caller is neither an admin
    nor the owning user.
    """
    owner_id = _owner_id(parent)
    if credentials.can_read(owner_id):
        return parent.get(provider)
    field_path = f"credentials.{provider}"
    log_access_denied(field_path, caller=credentials.to_dict(), owner_id=owner_id)
    raise PermissionError(
        "User lacks permissions to read nodes of type `User` with fields "
        f"`{field_path}`."
    )


def create_credential_resolver(provider: str) -> Callable:
    def resolve(parent, info):
        ctx = getattr(info, "context", {}) or {}
        credentials = ctx.get("credentials") or ANONYMOUS
        return resolve_credential_field(parent, credentials, provider)

    return resolve
