import pytest
from sqlalchemy import text

from app import create_app
from extensions import db
from migrations.seed_db import seed_database


SAMPLE_DATA = {
    'profile': {
        'name': 'Jane Doe',
        'title': 'Backend Engineer',
        'bio': 'Builds APIs.',
        'email': 'jane@example.com',
        'github': 'https://github.com/janedoe',
        'linkedin': 'https://www.linkedin.com/in/janedoe',
        'image_url': 'https://example.com/jane.png',
        'skills': ['Python', 'SQL', 'Docker'],
    },
    'projects': [
        {
            'id': 1,
            'title': 'Portfolio API',
            'description': 'Backend for the portfolio site.',
            'github': 'https://github.com/janedoe/portfolio-api',
            'demo': 'https://api.example.com',
            'image_url': 'https://example.com/api.png',
            'tech': ['Python', 'Flask'],
        },
        {
            'id': 2,
            'title': 'Dotfiles',
            'description': 'Shell configuration.',
            'github': 'https://github.com/janedoe/dotfiles',
            'demo': '',
            'image_url': '',
            'tech': [],
        },
        {
            'id': 3,
            'title': 'Task Board',
            'description': 'Kanban board.',
            'github': 'https://github.com/janedoe/task-board',
            'demo': 'https://tasks.example.com',
            'image_url': '',
            'tech': ['React', 'TypeScript', 'Vite'],
        },
    ],
}


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    with app.app_context():
        seed_database(SAMPLE_DATA, profile_id=app.config['PROFILE_ID'])
    return SAMPLE_DATA


@pytest.fixture
def drop_table(app):
    """Simulate a storage failure for one table"""
    def _drop(name):
        with app.app_context():
            db.session.execute(text(f'DROP TABLE {name}'))
            db.session.commit()
    return _drop
