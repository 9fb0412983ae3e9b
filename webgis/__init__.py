"""
WebGIS Exercise - Flask Application Initialization Module

This module creates and configures the Flask application: it attaches the
JSON user store, wires Flask-Login to the auth_token cookie, registers the
blueprints and installs the error handlers.

Core Components:
    - Flask application factory pattern
    - UserStore holding registered users in a flat JSON file
    - Flask-Login for protecting the map page
    - Blueprint registration for modular routing

Authentication:
    There is no server-side session table. Flask-Login's request loader reads
    the auth_token cookie on every request, checks its signature and age, and
    looks the user up in the store. Requests without a valid cookie are
    anonymous and get redirected to the login page by @login_required.

Attributes:
    login_manager: Flask-Login manager for authentication

Functions:
    load_user_from_cookie: Callback resolving the auth cookie to a User
    get_user_store: Return the store attached to the current app
    create_app: Application factory function
"""

import logging
import os

from flask import Flask, current_app, g, render_template, request
from flask_login import LoginManager

from .config import CONFIGS, DEFAULT_SECRET_KEY, DevelopmentConfig
from .tokens import load_auth_token
from .user_store import UserStore, UserStoreError

login_manager = LoginManager()

# When @login_required fails, redirect here
login_manager.login_view = 'auth.login'
login_manager.login_message = 'Please log in to view the map.'
login_manager.login_message_category = 'error'


def get_user_store():
    return current_app.extensions['user_store']


@login_manager.request_loader
def load_user_from_cookie(req):
    """
    Flask-Login request loader callback.

    Args:
        req: Incoming request

    Returns:
        User: User named by a valid auth cookie, None otherwise

    Note:
        Returning None will treat the request as logged out. A broken user
        file still raises, but the request is marked anonymous first so the
        error page can render without loading the user again.
    """
    token = req.cookies.get(current_app.config['AUTH_COOKIE_NAME'])
    username = load_auth_token(token)
    if username is None:
        return None
    try:
        return get_user_store().get(username)
    except UserStoreError:
        g._login_user = login_manager.anonymous_user()
        raise


def create_app(config=DevelopmentConfig):
    """
    Application factory function using Flask factory pattern.

    Args:
        config: Configuration class (DevelopmentConfig, TestingConfig,
                DeploymentConfig or a subclass). Defaults to DevelopmentConfig.
                The FLASK_CONFIG environment variable, when set to one of
                'development', 'testing' or 'deployment', takes precedence.

    Returns:
        Flask: Configured Flask application instance

    Blueprints:
        - main: index redirect and the protected map page
        - auth: login, logout and registration
    """
    flaskApp = Flask(__name__)
    config_name = os.getenv('FLASK_CONFIG', '').lower()
    flaskApp.config.from_object(CONFIGS.get(config_name, config))

    if (flaskApp.config['SECRET_KEY'] == DEFAULT_SECRET_KEY
            and not flaskApp.config.get('DEBUG') and not flaskApp.config.get('TESTING')):
        raise RuntimeError('Set WEBGIS_SECRET_KEY: auth cookies signed with the built-in key can be forged')

    flaskApp.logger.setLevel(getattr(logging, str(flaskApp.config['LOG_LEVEL']).upper(), logging.INFO))

    flaskApp.extensions['user_store'] = UserStore(flaskApp.config['USERS_FILE'])
    flaskApp.logger.debug('Using user file %s', flaskApp.config['USERS_FILE'])

    login_manager.init_app(flaskApp)

    from .routes import main
    from .auth import auth

    flaskApp.register_blueprint(main)
    flaskApp.register_blueprint(auth)

    @flaskApp.errorhandler(UserStoreError)
    def user_store_failure(error):
        flaskApp.logger.exception('User store failure on %s %s', request.method, request.path)
        return render_template('error.html', title='Server Error',
                               message='User accounts are unavailable right now.'), 500

    @flaskApp.errorhandler(404)
    def not_found(error):
        return render_template('error.html', title='Not Found',
                               message='That page does not exist.'), 404

    @flaskApp.after_request
    def add_header(response):
        """
        Add cache control headers to prevent browser caching.

        Keeps the map page from being shown out of the browser cache after
        the user has logged out.
        """
        response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate, max-age=0'
        response.headers['Pragma'] = 'no-cache'
        response.headers['Expires'] = '0'
        return response

    return flaskApp
