"""
Main entry point for the Purchase Tax Tracker API.
"""

from app import create_app
import logging
import os

app = create_app()

if __name__ == "__main__":
    # Get port from environment or use default
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('FLASK_ENV') == 'development'

    logging.getLogger(__name__).info(f"Server starting at: http://127.0.0.1:{port}")

    app.run(host='0.0.0.0', port=port, debug=debug)
