"""
Authentication module for user login, registration, and logout.

Passwords are hashed with Werkzeug and stored in the JSON user file.
A successful login sets the signed auth_token cookie; logging out deletes it.
"""

from flask import render_template, redirect, url_for, flash, current_app, Blueprint
from werkzeug.security import generate_password_hash

from .forms import LoginForm, RegisterForm
from .tokens import issue_auth_token
from .user_store import DuplicateUserError
from . import get_user_store

# Create authentication blueprint for modular route organization
auth = Blueprint("auth", __name__)


def set_auth_cookie(response, username):
    config = current_app.config
    response.set_cookie(
        config['AUTH_COOKIE_NAME'],
        issue_auth_token(username),
        max_age=config['AUTH_COOKIE_MAX_AGE'],
        httponly=True,
        secure=config['AUTH_COOKIE_SECURE'],
        samesite=config['AUTH_COOKIE_SAMESITE'],
    )
    return response


def clear_auth_cookie(response):
    config = current_app.config
    response.delete_cookie(
        config['AUTH_COOKIE_NAME'],
        httponly=True,
        secure=config['AUTH_COOKIE_SECURE'],
        samesite=config['AUTH_COOKIE_SAMESITE'],
    )
    return response


@auth.route('/login', methods=['GET', 'POST'])
def login():
    """
    Handle the login page and authentication.

    GET: Display the login form
    POST: Check the credentials against the user file

    Returns:
        Redirect to the map page with the auth cookie set on success,
        otherwise the login form with an error message
    """
    form = LoginForm()

    if not form.validate_on_submit():
        return render_template('login.html', title='Log In', form=form)

    username = form.username.data.strip()
    user = get_user_store().get(username)

    if user is None or not user.check_password(form.password.data):
        current_app.logger.warning('Failed login for username %r', username)
        flash("Login Failed. Double Check Your Details And Try Again.", 'error')
        return render_template('login.html', title='Log In', form=form)

    current_app.logger.info('User %s logged in', user.username)
    return set_auth_cookie(redirect(url_for('main.map_page')), user.username)


@auth.route('/register', methods=['GET', 'POST'])
def register():
    """
    Handle the registration page and account creation.

    Registration process:
    1. Validate form data (required fields, email, passwords match)
    2. Hash the password
    3. Add the record to the user file, rejecting taken usernames
    4. Redirect to the login page

    Returns:
        GET: Rendered registration form
        POST: Redirect to login on success or the form with errors
    """
    form = RegisterForm()

    if not form.validate_on_submit():
        return render_template('register.html', title='Register', form=form)

    username = form.username.data.strip()
    store = get_user_store()

    # Skip hashing for a taken name; create() still rejects a concurrent duplicate
    if store.exists(username):
        flash("Username Already In Use", 'error')
        return render_template('register.html', title='Register', form=form)

    try:
        store.create(
            username,
            form.email.data.strip(),
            generate_password_hash(form.password.data),
        )
    except DuplicateUserError:
        flash("Username Already In Use", 'error')
        return render_template('register.html', title='Register', form=form)

    current_app.logger.info('Registered user %s', username)
    flash("Account Created", 'success')
    return redirect(url_for('auth.login'))


@auth.route('/logout')
def logout():
    """
    Delete the auth cookie and return to the login page.
    """
    flash("Logged out.", "success")
    current_app.logger.info('Logout')
    return clear_auth_cookie(redirect(url_for('auth.login')))
