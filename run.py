#!/usr/bin/env python3
"""
Entry point for the Player Gateway.

Usage:
    python run.py                    # Run the gateway

Environment Variables:
    FLASK_ENV: development, production or testing (default: development)
    PORT: Port to run on (default: 8080)
    ADMIN_USERNAME / ADMIN_PASSWORD: admin Basic credentials
    MAX_NUMBER_OF_USERS: initial player limit (default: 3)
    REDIS_URL: publish player events to Redis when set
"""
import logging
import os


def run_gateway():
    """Run the player gateway."""
    from gateway.app import create_app

    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO'),
        format='%(asctime)s | %(levelname)s | %(name)s | %(message)s'
    )

    app = create_app()
    port = int(os.getenv('PORT', 8080))
    debug = os.getenv('FLASK_ENV', 'development') == 'development'

    print(f"Starting Player Gateway on port {port}...")
    app.run(host='0.0.0.0', port=port, debug=debug, threaded=True)


if __name__ == '__main__':
    run_gateway()
