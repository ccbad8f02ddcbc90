"""
Identity provider - registration, login and session token verification.

Callers only see user ids and opaque token strings; the token format lives in
app.utils.session_tokens.
"""

from app import db
from app.errors import ConflictError, InvalidTokenError, StorageError, UnauthorizedError, ValidationError
from app.models.user import User
from app.utils.audit_log import AuditLogger
from app.utils.password_security import validate_password
from app.utils.session_tokens import TokenError, issue_token, read_token
from email_validator import validate_email, EmailNotValidError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from typing import Tuple
import logging

logger = logging.getLogger(__name__)


def _require_text(**fields) -> None:
    """Reject credentials sent as anything other than strings."""
    for name, value in fields.items():
        if value is not None and not isinstance(value, str):
            raise ValidationError(f"{name.capitalize()} must be a string")


def register(username: str, email: str, password: str) -> Tuple[User, str]:
    """
    Create a user and issue a session token.

    Raises:
        ValidationError: missing fields, invalid email or rejected password
        ConflictError: username or email already taken (nothing is written)
    """
    _require_text(username=username, email=email, password=password)

    username = (username or '').strip()
    email = (email or '').strip().lower()
    password = password or ''

    if not username or not email or not password:
        raise ValidationError('All fields are required')

    try:
        email_info = validate_email(email, check_deliverability=False)
        email = email_info.normalized
    except EmailNotValidError as e:
        raise ValidationError(f'Invalid email: {str(e)}')

    is_valid, pwd_errors = validate_password(password)
    if not is_valid:
        raise ValidationError('; '.join(pwd_errors))

    if User.query.filter_by(username=username).first():
        AuditLogger.log_security_event('REGISTRATION_DUPLICATE_USERNAME', {'username': username})
        raise ConflictError()

    if User.query.filter_by(email=email).first():
        AuditLogger.log_security_event('REGISTRATION_DUPLICATE_EMAIL', {'email': email})
        raise ConflictError()

    user = User(username=username, email=email)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration
        db.session.rollback()
        raise ConflictError()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error(f"Failed to create user {username}: {e}", exc_info=True)
        raise StorageError('Error creating user')

    AuditLogger.log_account_creation(username, email)
    return user, issue_token(user.id)


def login(username: str, password: str) -> Tuple[User, str]:
    """
    Check credentials and issue a session token.

    Raises:
        ValidationError: missing username or password
        UnauthorizedError: unknown user or wrong password
    """
    _require_text(username=username, password=password)

    username = (username or '').strip()
    password = password or ''

    if not username or not password:
        AuditLogger.log_auth_failure(username, 'missing_credentials')
        raise ValidationError('Username and password are required')

    user = User.query.filter_by(username=username).first()
    if user is None or not user.check_password(password):
        AuditLogger.log_auth_failure(username, 'invalid_credentials')
        raise UnauthorizedError()

    AuditLogger.log_auth_success(username)
    return user, issue_token(user.id)


def verify(token: str) -> int:
    """
    Return the user id a session token was issued for.

    Raises:
        InvalidTokenError: tampered, malformed or expired token
    """
    try:
        return read_token(token)
    except TokenError as e:
        AuditLogger.log_security_event('INVALID_SESSION_TOKEN', {'reason': str(e)})
        raise InvalidTokenError()
