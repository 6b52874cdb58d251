# credgraph/api/auth/token.py
"""
Bearer token helpers.

The server does not authenticate anyone itself; it only verifies tokens minted
elsewhere with the shared secret and reads the caller's identity from them:
- sub  -> caller user id
- role -> "admin" grants read access to every user's credentials
Exports: decode_token
"""
from __future__ import annotations
from typing import Dict, Any, Optional

from jose import jwt, JWTError, ExpiredSignatureError

from credgraph.api.settings import SECRET_KEY, ALGORITHM
from credgraph.api.utils.logger import write_log


def decode_token(token: Optional[str]) -> Optional[Dict[str, Any]]:
    """Return the verified claims of token, or None if it is missing or invalid."""
    if not token:
        return None
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        write_log({"event": "token_expired", "token_snippet": token[:48]})
        return None
    except JWTError as e:
        write_log({"event": "token_invalid", "error": str(e), "token_snippet": token[:48]})
        return None
