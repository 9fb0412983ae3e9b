"""
WTForms definitions for the authentication pages.

All forms include CSRF protection automatically via Flask-WTF.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, SubmitField
from wtforms.validators import DataRequired, Email, EqualTo, Length, Regexp


class LoginForm(FlaskForm):
    """
    User login form with username/password authentication.

    Fields:
        username: Required username field
        password: Required password field
        submit: Form submission button
    """
    username = StringField('Username', validators=[DataRequired()])
    password = PasswordField('Password', validators=[DataRequired()])
    submit = SubmitField('Log In')


class RegisterForm(FlaskForm):
    """
    User registration form for creating new accounts.

    Fields:
        username: Required unique username
        email: Required email address
        password: Required password
        confirm_password: Password confirmation (must match password)
        submit: Form submission button
    """
    username = StringField(
        'Username',
        validators=[
            DataRequired(),
            Length(min=3, max=64),
            Regexp(r'^[A-Za-z0-9_.-]+$', message='Use letters, digits, ".", "_" or "-" only'),
        ]
    )
    email = StringField('Email', validators=[DataRequired(), Email()])
    password = PasswordField('Password', validators=[DataRequired(), Length(min=6)])
    confirm_password = PasswordField(
        'Confirm Password',
        validators=[DataRequired(), EqualTo('password', message='Passwords must match')]
    )
    submit = SubmitField('Register')
