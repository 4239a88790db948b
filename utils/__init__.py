"""
Utils Package - Centralized utility modules initialization
"""

from .errors import APIError, ValidationError, NotFoundError, StorageError
from .data import (
    load_profile,
    load_skills,
    load_projects,
    load_project,
    load_tech_map,
    profile_to_dict,
    project_to_dict
)
from .contact import ContactMessage, parse_contact_message, record_contact_message
from .notifications import get_telegram_credentials, send_telegram_notification
from .responses import envelope, plain_error

__all__ = [
    # Errors
    'APIError',
    'ValidationError',
    'NotFoundError',
    'StorageError',

    # Data
    'load_profile',
    'load_skills',
    'load_projects',
    'load_project',
    'load_tech_map',
    'profile_to_dict',
    'project_to_dict',

    # Contact
    'ContactMessage',
    'parse_contact_message',
    'record_contact_message',

    # Notifications
    'get_telegram_credentials',
    'send_telegram_notification',

    # Responses
    'envelope',
    'plain_error'
]
