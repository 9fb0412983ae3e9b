"""
Main routing module for the WebGIS application.

Blueprint: 'main' - the index redirect and the protected map page
"""

from flask import render_template, redirect, url_for, current_app, Blueprint
from flask_login import current_user, login_required

# Create main blueprint for all non-auth routes
main = Blueprint('main', __name__)


def map_config():
    """
    Collect the settings the browser-side map needs.

    The map page embeds this as JSON; map.js builds the WMS layer and the
    GetFeatureInfo requests from it.

    Returns:
        dict: WMS endpoint, layer, info format and initial view
    """
    config = current_app.config
    lon, lat = config['MAP_CENTER']
    return {
        'wmsUrl': config['GEOSERVER_WMS_URL'],
        'layer': config['WMS_LAYER'],
        'infoFormat': config['WMS_INFO_FORMAT'],
        'featureCount': config['WMS_FEATURE_COUNT'],
        'center': [lon, lat],
        'zoom': config['MAP_ZOOM'],
    }


@main.route('/')
def index():
    """
    Send authenticated users to the map and everyone else to the login page.
    """
    if current_user.is_authenticated:
        return redirect(url_for('main.map_page'))
    return redirect(url_for('auth.login'))


@main.route('/map')
@login_required
def map_page():
    return render_template(
        'map.html',
        title='Map',
        username=current_user.username,
        map_config=map_config()
    )
