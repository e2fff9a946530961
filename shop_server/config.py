"""Environment-driven settings"""

import os


def load_config():
    """Read settings from the environment, falling back to defaults."""
    return {
        'HOST': os.getenv('SHOP_HOST', '0.0.0.0'),
        'PORT': int(os.getenv('SHOP_PORT', '8080')),
        'CORS_ORIGINS': [
            origin.strip()
            for origin in os.getenv('SHOP_CORS_ORIGINS', '*').split(',')
            if origin.strip()
        ],
        'LOG_LEVEL': os.getenv('SHOP_LOG_LEVEL', 'INFO').upper(),
    }


def base_url():
    """Target of the smoke checks"""
    return os.getenv('SHOP_BASE_URL', 'http://localhost:8080')
