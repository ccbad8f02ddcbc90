"""
Authentication routes - register, login, current user.
"""

from flask import Blueprint, jsonify
from flask_login import login_required, current_user
from app.utils import identity
from app.utils.validation import json_body

auth_bp = Blueprint('auth', __name__, url_prefix='/api')


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create an account and return a session token."""
    data = json_body()

    user, token = identity.register(
        data.get('username'),
        data.get('email'),
        data.get('password')
    )

    return jsonify({
        'message': 'User registered successfully',
        'user': user.to_dict(),
        'token': token
    }), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Exchange username and password for a session token."""
    data = json_body()

    user, token = identity.login(data.get('username'), data.get('password'))

    return jsonify({
        'message': 'Login successful',
        'user': user.to_dict(),
        'token': token
    })


@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify({'user': current_user.to_dict()})
