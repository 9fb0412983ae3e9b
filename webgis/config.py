"""
Configuration classes for the WebGIS Flask application.

This module provides different configuration settings for various environments:
- Development: Debug mode enabled with auto-reload
- Testing: CSRF disabled, fixed secret key for test clients
- Deployment: Production settings with secure cookies
"""

import os

# Get the absolute path of the application directory
basedir = os.path.abspath(os.path.dirname(__file__))

# Only accepted by debug and testing apps, see create_app
DEFAULT_SECRET_KEY = 'default_secret_key'


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """
    Base configuration class with settings common to all environments.

    Attributes:
        SECRET_KEY: Signs the session cookie, CSRF tokens and auth tokens
        USERS_FILE: JSON file holding the username -> record mapping
        AUTH_COOKIE_*: Name, lifetime and flags of the login cookie
        GEOSERVER_WMS_URL, WMS_*: WMS service queried by the map page
        MAP_CENTER, MAP_ZOOM: Initial map view (lon, lat in EPSG:4326)
    """
    SECRET_KEY = os.environ.get('WEBGIS_SECRET_KEY', DEFAULT_SECRET_KEY)

    # Flat user record file, rewritten wholesale on every registration
    USERS_FILE = os.environ.get('WEBGIS_USERS_FILE', os.path.join(basedir, 'users.json'))

    AUTH_COOKIE_NAME = 'auth_token'
    AUTH_COOKIE_MAX_AGE = 3600
    AUTH_COOKIE_SECURE = _env_flag('AUTH_COOKIE_SECURE', False)
    AUTH_COOKIE_SAMESITE = 'Lax'

    GEOSERVER_WMS_URL = os.environ.get('GEOSERVER_WMS_URL', 'http://localhost:8080/geoserver/wms')
    WMS_LAYER = os.environ.get('WMS_LAYER', 'topp:states')
    WMS_INFO_FORMAT = os.environ.get('WMS_INFO_FORMAT', 'application/json')
    WMS_FEATURE_COUNT = int(os.environ.get('WMS_FEATURE_COUNT', '10'))

    MAP_CENTER = (
        float(os.environ.get('MAP_CENTER_LON', '-98.5795')),
        float(os.environ.get('MAP_CENTER_LAT', '39.8283')),
    )
    MAP_ZOOM = int(os.environ.get('MAP_ZOOM', '4'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DeploymentConfig(Config):
    """
    Production deployment configuration.

    Debug mode is disabled and both the auth cookie and the Flask session
    cookie are only sent over HTTPS.
    """
    AUTH_COOKIE_SECURE = _env_flag('AUTH_COOKIE_SECURE', True)
    SESSION_COOKIE_SECURE = AUTH_COOKIE_SECURE
    SESSION_COOKIE_HTTPONLY = True


class TestingConfig(Config):
    """
    Configuration for unit testing.

    Tests point USERS_FILE at a temporary path by subclassing this class.
    """
    TESTING = True

    # Test clients post plain form data without a CSRF token
    WTF_CSRF_ENABLED = False

    SECRET_KEY = 'testing-secret-key'
    AUTH_COOKIE_SECURE = False
    LOG_LEVEL = 'DEBUG'


class DevelopmentConfig(Config):
    """
    Development environment configuration.

    Enables debug mode for detailed error messages and auto-reload.
    """
    DEBUG = True

    # Auto-reload templates when they change
    TEMPLATES_AUTO_RELOAD = True


CONFIGS = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'deployment': DeploymentConfig,
}
