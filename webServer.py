"""
Production web server entry point for the WebGIS exercise.

This module creates the Flask app instance with deployment configuration
and can be used by WSGI servers like Gunicorn or uWSGI.

Usage:
    Development: flask --app webgis run
    Production: gunicorn webServer:app
"""

from webgis import create_app
from webgis.config import DeploymentConfig

# DeploymentConfig marks the auth cookie Secure; serve it behind HTTPS
app = create_app(DeploymentConfig)

if __name__ == "__main__":
    app.run()
