import os
import json

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config", "server.json")

with open(CONFIG_PATH) as f:
    config_data = json.load(f)

SECRET_KEY = os.getenv("SECRET_KEY", config_data.get("SECRET_KEY", "fallback-secret"))
ALGORITHM = os.getenv("ALGORITHM", config_data.get("ALGORITHM", "HS256"))
ADMIN_ROLE = os.getenv("ADMIN_ROLE", config_data.get("ADMIN_ROLE", "admin"))
GRAPHQL_DEBUG = os.getenv("GRAPHQL_DEBUG", str(config_data.get("GRAPHQL_DEBUG", False))).lower() in ("1", "true", "yes")

# Relative paths are resolved against the api package directory
USERS_PATH = os.getenv("USERS_PATH", config_data.get("USERS_PATH", os.path.join("db", "users.json")))
if not os.path.isabs(USERS_PATH):
    USERS_PATH = os.path.join(os.path.dirname(__file__), USERS_PATH)
