import time
from types import SimpleNamespace

import pytest
from jose import jwt

from credgraph.api.permissions import CallerCredentials
from credgraph.api.settings import SECRET_KEY, ALGORITHM


@pytest.fixture
def client():
    from credgraph.api import app

    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def graphql(client):
    def run(query, token=None, variables=None):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        response = client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=headers,
        )
        return response.status_code, response.get_json()

    return run


@pytest.fixture
def make_token():
    # tokens are issued by the identity service in production
    def sign(subject, role="user", ttl=300):
        now = int(time.time())
        claims = {"sub": subject, "role": role, "iat": now, "exp": now + ttl}
        return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)

    return sign


@pytest.fixture
def alice_token(make_token):
    return make_token("u-alice")


@pytest.fixture
def admin_token(make_token):
    return make_token("u-root", role="admin")


@pytest.fixture
def make_info():
    def build(credentials: CallerCredentials):
        return SimpleNamespace(context={"credentials": credentials})

    return build
