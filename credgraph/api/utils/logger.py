# credgraph/api/utils/logger.py
import json
from datetime import datetime, timezone
from typing import Optional


# Basic structured logging function
def write_log(entry: dict, stream: str = "default"):
    entry = dict(entry)
    entry.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    entry.setdefault("stream", stream)
    print(json.dumps(entry, ensure_ascii=False, default=str))


def log_access_denied(field_path: str, caller: Optional[dict] = None, owner_id=None):
    """
    Audit a denied credential read. caller is the identity-context snapshot
    (is_admin / user_id); never include the credential values themselves.
    """
    caller = caller or {}
    write_log({
        "event": "access_denied",
        "reason": f"missing permission: {field_path}",
        "field": field_path,
        "user_id": caller.get("user_id"),
        "is_admin": caller.get("is_admin"),
        "owner_id": owner_id,
    }, stream="security")
