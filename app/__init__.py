"""
Application factory and initialization.
"""

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from dotenv import load_dotenv
import logging
import os

# Load environment variables
load_dotenv()

# Initialize extensions
db = SQLAlchemy()
login_manager = LoginManager()


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    # Configuration
    app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'dev-secret-key-change-me')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.getenv('DATABASE_URL', 'sqlite:///taxcalculator.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    # Session tokens (Fernet key is derived from SECRET_KEY when not set)
    app.config['SESSION_TOKEN_KEY'] = os.getenv('SESSION_TOKEN_KEY')
    app.config['SESSION_TOKEN_TTL'] = int(os.getenv('SESSION_TOKEN_TTL', 24 * 60 * 60))

    # Tax rates
    from app.utils.tax_calculator import BASIC_TAX_RATE, PURCHASE_DEDUCTION_RATE, DEDUCTION_CAP_RATE
    app.config['BASIC_TAX_RATE'] = float(os.getenv('BASIC_TAX_RATE', BASIC_TAX_RATE))
    app.config['PURCHASE_DEDUCTION_RATE'] = float(os.getenv('PURCHASE_DEDUCTION_RATE', PURCHASE_DEDUCTION_RATE))
    app.config['DEDUCTION_CAP_RATE'] = float(os.getenv('DEDUCTION_CAP_RATE', DEDUCTION_CAP_RATE))

    if test_config:
        app.config.update(test_config)

    # Initialize extensions with app
    db.init_app(app)
    login_manager.init_app(app)

    # Error handlers
    from app.errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from app.routes.main import main_bp
    from app.routes.auth import auth_bp
    from app.routes.income import income_bp
    from app.routes.purchases import purchases_bp
    from app.routes.tax import tax_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(income_bp)
    app.register_blueprint(purchases_bp)
    app.register_blueprint(tax_bp)

    # Create database tables
    with app.app_context():
        from app import models  # noqa: F401
        db.create_all()

    return app


@login_manager.request_loader
def load_user_from_request(request):
    """Load user from the bearer token in the Authorization header."""
    from app.models.user import User
    from app.utils.identity import verify
    from app.utils.audit_log import AuditLogger
    from app.errors import InvalidTokenError

    auth_header = request.headers.get('Authorization', '')
    parts = auth_header.split(' ')
    if len(parts) < 2 or parts[0].lower() != 'bearer' or not parts[1]:
        return None
    token = parts[1]

    user_id = verify(token)
    user = db.session.get(User, user_id)
    if user is None:
        AuditLogger.log_security_event('TOKEN_FOR_UNKNOWN_USER', {'user_id': user_id})
        raise InvalidTokenError()
    return user


@login_manager.unauthorized_handler
def unauthorized():
    """Reject requests that carry no session token."""
    from app.errors import AuthRequiredError
    raise AuthRequiredError()
