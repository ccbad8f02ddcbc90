"""
Audit logging for authentication and security events.
"""

from flask import has_request_context, request
import logging

audit_logger = logging.getLogger('audit')


class AuditLogger:
    """Writes security-relevant events to the 'audit' logger."""

    @staticmethod
    def _client_ip() -> str:
        if has_request_context():
            return request.remote_addr or '-'
        return '-'

    @classmethod
    def log_auth_success(cls, username: str) -> None:
        audit_logger.info(f"AUTH_SUCCESS username={username} ip={cls._client_ip()}")

    @classmethod
    def log_auth_failure(cls, username: str, reason: str) -> None:
        audit_logger.warning(f"AUTH_FAILURE username={username} reason={reason} ip={cls._client_ip()}")

    @classmethod
    def log_account_creation(cls, username: str, email: str) -> None:
        audit_logger.info(f"ACCOUNT_CREATED username={username} email={email} ip={cls._client_ip()}")

    @classmethod
    def log_security_event(cls, event: str, details: dict = None) -> None:
        parts = [event] + [f"{k}={v}" for k, v in (details or {}).items()]
        parts.append(f"ip={cls._client_ip()}")
        audit_logger.warning(' '.join(parts))
