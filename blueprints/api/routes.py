"""
API Routes - Public JSON API for the portfolio website
Handles: Profile, projects, contact form, health check
"""

from flask import request, current_app
from werkzeug.exceptions import BadRequest
from extensions import db
from utils.contact import parse_contact_message, record_contact_message
from utils.data import load_profile, load_projects, load_project
from utils.errors import ValidationError
from utils.responses import envelope
from . import api_bp

# Largest value a BIGINT id column can hold
MAX_PROJECT_ID = 2**63 - 1


def parse_project_id(value):
    """Parse a project id path segment as a non-negative 64-bit integer"""
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        raise ValidationError('Invalid project ID')
    project_id = int(value)
    if project_id > MAX_PROJECT_ID:
        raise ValidationError('Invalid project ID')
    return project_id


@api_bp.route('/profile', methods=['GET'])
def get_profile():
    """Portfolio owner's profile and skills"""
    profile = load_profile(db.session, current_app.config['PROFILE_ID'])
    return envelope('Profile retrieved successfully', profile)


@api_bp.route('/projects', methods=['GET'])
def get_projects():
    """All projects with their tech stacks"""
    projects = load_projects(db.session)
    return envelope('Projects retrieved successfully', projects)


@api_bp.route('/projects/<digits:project_id>', methods=['GET'])
def get_project(project_id):
    """Single project by id"""
    project = load_project(db.session, parse_project_id(project_id))
    return envelope('Project retrieved successfully', project)


@api_bp.route('/projects/<project_id>', methods=['GET'])
def reject_project_id(project_id):
    """Non-numeric project ids never reach get_project"""
    raise ValidationError('Invalid project ID')


@api_bp.route('/contact', methods=['POST'])
def contact():
    """Contact form submission - logged, not stored"""
    try:
        payload = request.get_json(force=True)
    except BadRequest:
        raise ValidationError('Invalid JSON')
    msg = parse_contact_message(payload)
    record_contact_message(msg)
    return envelope('Message sent successfully')


@api_bp.route('/health', methods=['GET'])
def health_check():
    """Liveness probe, no database access"""
    return envelope('API is running', {'status': 'healthy'})
