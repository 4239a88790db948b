"""
Seed Script: JSON to database
Replaces the profile, skills, projects and project tech rows with the
contents of a JSON file. The API itself never writes; this is the
administration path for changing what it serves.

Usage:
    python migrations/seed_db.py [path/to/seed_data.json]
"""

import os
import sys
import json

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from extensions import db
from models import Profile, Skill, Project, ProjectTech

DEFAULT_SEED_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'seed_data.json')


def clear_tables():
    """Delete all portfolio rows, children first"""
    db.session.query(ProjectTech).delete()
    db.session.query(Project).delete()
    db.session.query(Skill).delete()
    db.session.query(Profile).delete()


def seed_profile(profile_data, profile_id):
    """Insert the profile row and its skills"""
    profile = Profile(
        id=profile_id,
        name=profile_data.get('name', ''),
        title=profile_data.get('title', ''),
        bio=profile_data.get('bio', ''),
        email=profile_data.get('email', ''),
        github=profile_data.get('github', ''),
        linkedin=profile_data.get('linkedin', ''),
        image_url=profile_data.get('image_url', '')
    )
    db.session.add(profile)
    db.session.flush()

    # Skills form a set
    skills = list(dict.fromkeys(profile_data.get('skills', [])))
    print(f"  Seeding {len(skills)} skills...")
    for skill in skills:
        db.session.add(Skill(profile_id=profile_id, skill=skill))


def seed_projects(projects_data):
    """Insert project rows and their tech rows"""
    print(f"  Seeding {len(projects_data)} projects...")
    for project_json in projects_data:
        project = Project(
            id=project_json.get('id'),
            title=project_json.get('title', ''),
            description=project_json.get('description', ''),
            github=project_json.get('github', ''),
            demo=project_json.get('demo', ''),
            image_url=project_json.get('image_url', '')
        )
        db.session.add(project)
        # Assign the id before adding children
        db.session.flush()

        for tech in dict.fromkeys(project_json.get('tech', [])):
            db.session.add(ProjectTech(project_id=project.id, tech=tech))


def seed_database(data, profile_id=1):
    """
    Replace the portfolio tables with the given data

    Must run inside an application context. Rolls back on failure.

    Args:
        data (dict): {'profile': {...}, 'projects': [...]}
        profile_id (int): Identifier the profile row is stored under
    """
    try:
        clear_tables()
        if data.get('profile'):
            seed_profile(data['profile'], profile_id)
        seed_projects(data.get('projects', []))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def main():
    """Main seed function"""
    from app import create_app

    print("=" * 60)
    print("Portfolio Seed Script")
    print("=" * 60)

    json_file = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SEED_FILE
    if not os.path.exists(json_file):
        print(f"Error: {json_file} not found!")
        sys.exit(1)

    print(f"\nLoading data from {json_file}...")
    with open(json_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    app = create_app()
    with app.app_context():
        seed_database(data, profile_id=app.config['PROFILE_ID'])

    print("\n" + "=" * 60)
    print("Seeding completed successfully!")
    print("=" * 60)


if __name__ == '__main__':
    main()
