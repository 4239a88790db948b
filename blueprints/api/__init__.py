"""
API Blueprint - Public JSON API for the portfolio website
Handles: Profile, projects, contact form, health check
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
