import json

from credgraph.api.settings import USERS_PATH
from credgraph.api.utils.logger import write_log

# Load user store
with open(USERS_PATH) as f:
    users = json.load(f)


def get_user(user_id: str):
    user = users.get(user_id)
    write_log({"event": "user_lookup", "user_id": user_id, "found": bool(user)})
    return user
