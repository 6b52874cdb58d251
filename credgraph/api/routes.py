from ariadne import QueryType, ObjectType
from credgraph.api.auth.user import get_user
from credgraph.api.builtins.credential_types import PROVIDERS
from credgraph.api.permissions import ANONYMOUS

query = QueryType()
user = ObjectType("User")


@query.field("ping")
def resolve_ping(_, info):
    return "pong"


@query.field("viewer")
def resolve_viewer(_, info):
    credentials = info.context.get("credentials") or ANONYMOUS
    if not credentials.user_id:
        return None
    return get_user(credentials.user_id)


@query.field("user")
def resolve_user(_, info, id):
    return get_user(id)


@user.field("credentials")
def resolve_user_credentials(obj, info):
    stored = obj.get("credentials") or {}
    collection = {provider: stored.get(provider) for provider in PROVIDERS}
    # owner reference checked by the credential permission gate
    collection["__node"] = {"type": "User", "id": obj.get("id")}
    return collection
