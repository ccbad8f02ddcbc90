"""
Session token issuance and verification.

Tokens are Fernet tokens (authenticated encryption with an embedded issuance
timestamp) carrying the user id. A token is valid for SESSION_TOKEN_TTL seconds
after issuance; there is no refresh or revocation.

SESSION_TOKEN_KEY must be a valid Fernet key (base64 urlsafe, 44 chars). When it
is not set, a key is derived from SECRET_KEY so a single secret is enough for
development.
"""

from __future__ import annotations

from cryptography.fernet import Fernet, InvalidToken
from flask import current_app
import base64
import hashlib
import json
import time
from typing import Optional


class TokenError(Exception):
    pass


def _load_token_key() -> bytes:
    """Return the Fernet key from app config, deriving it from SECRET_KEY if needed."""
    key = current_app.config.get('SESSION_TOKEN_KEY')
    if key:
        return key.encode() if isinstance(key, str) else key

    secret = current_app.config.get('SECRET_KEY')
    if not secret:
        raise TokenError('SECRET_KEY or SESSION_TOKEN_KEY must be set')
    digest = hashlib.sha256(secret.encode() if isinstance(secret, str) else secret).digest()
    return base64.urlsafe_b64encode(digest)


def get_token_fernet() -> Fernet:
    """Return a Fernet instance for the session token key."""
    key = _load_token_key()
    try:
        return Fernet(key)
    except ValueError as e:
        raise TokenError(f'Invalid SESSION_TOKEN_KEY: {e}')


def issue_token(user_id: int, issued_at: Optional[int] = None) -> str:
    """Issue a session token for user_id, stamped with issued_at (defaults to now)."""
    payload = json.dumps({'uid': user_id}).encode()
    f = get_token_fernet()
    token = f.encrypt_at_time(payload, int(issued_at if issued_at is not None else time.time()))
    return token.decode()


def read_token(token: str) -> int:
    """Return the user id carried by token.

    Raises TokenError for tampered, malformed or expired tokens.
    """
    ttl = int(current_app.config.get('SESSION_TOKEN_TTL', 24 * 60 * 60))
    f = get_token_fernet()
    try:
        payload = f.decrypt(token.encode(), ttl=ttl)
    except InvalidToken:
        raise TokenError('Invalid or expired session token')

    try:
        return int(json.loads(payload)['uid'])
    except (ValueError, KeyError, TypeError):
        raise TokenError('Malformed session token payload')
