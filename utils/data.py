"""
Data Management Module - Read access to the portfolio tables
Every function takes the SQLAlchemy session to run against, so callers
decide which database the reads go to.
"""

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from models import Profile, Skill, Project, ProjectTech
from .errors import NotFoundError, StorageError


def profile_to_dict(profile, skills=None):
    """Convert profile model to dictionary"""
    result = {
        'name': profile.name or '',
        'title': profile.title or '',
        'bio': profile.bio or '',
        'email': profile.email or '',
        'github': profile.github or '',
        'linkedin': profile.linkedin or '',
        'skills': skills or [],
    }
    if profile.image_url:
        result['image_url'] = profile.image_url
    return result


def project_to_dict(project, tech=None):
    """Convert project model to dictionary"""
    result = {
        'id': project.id,
        'title': project.title or '',
        'description': project.description or '',
        'tech': tech or [],
        'github': project.github or '',
        'demo': project.demo or '',
    }
    if project.image_url:
        result['image_url'] = project.image_url
    return result


def load_skills(session, profile_id):
    """
    Load the skill strings of a profile

    Rows whose value is NULL are skipped.

    Raises:
        StorageError: If the skills query fails
    """
    try:
        rows = session.execute(
            select(Skill.skill).where(Skill.profile_id == profile_id)
        ).scalars().all()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching skills for profile {profile_id}: {str(e)}")
        raise StorageError('Error fetching skills') from e
    return [skill for skill in rows if skill is not None]


def load_profile(session, profile_id):
    """
    Load the portfolio profile together with its skills

    Args:
        session: SQLAlchemy session
        profile_id (int): Identifier of the profile row

    Returns:
        dict: Profile data with a ``skills`` list

    Raises:
        NotFoundError: If no profile row exists
        StorageError: If the profile or skills query fails
    """
    try:
        profile = session.execute(
            select(Profile).where(Profile.id == profile_id)
        ).scalar_one_or_none()
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching profile {profile_id}: {str(e)}")
        raise StorageError('Error fetching profile') from e

    if profile is None:
        raise NotFoundError('Profile not found')

    result = profile_to_dict(profile)
    result['skills'] = load_skills(session, profile_id)
    return result


def load_tech_map(session, project_ids):
    """
    Load tech strings for several projects in one query

    Best effort: a failing query is logged and every project gets an
    empty list, so the caller can still return the projects.

    Returns:
        dict: {project_id: [tech, ...]} with an entry for every id
    """
    tech_map = {project_id: [] for project_id in project_ids}
    if not tech_map:
        return tech_map

    try:
        rows = session.execute(
            select(ProjectTech.project_id, ProjectTech.tech)
            .where(ProjectTech.project_id.in_(list(tech_map)))
        ).all()
    except SQLAlchemyError as e:
        current_app.logger.warning(f"Error fetching tech for projects {list(tech_map)}: {str(e)}")
        # Leave the session usable for the rest of the request
        session.rollback()
        return tech_map

    for project_id, tech in rows:
        if tech is not None:
            tech_map[project_id].append(tech)
    return tech_map


def load_projects(session):
    """
    Load all projects with their tech lists, in storage order

    Raises:
        StorageError: If the projects query fails
    """
    try:
        projects = session.execute(select(Project)).scalars().all()
        # Detach from the ORM before the tech lookup can roll back the session
        results = [project_to_dict(p) for p in projects]
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching projects: {str(e)}")
        raise StorageError('Error fetching projects') from e

    tech_map = load_tech_map(session, [p['id'] for p in results])
    for project in results:
        project['tech'] = tech_map[project['id']]
    return results


def load_project(session, project_id):
    """
    Load a single project with its tech list

    Raises:
        NotFoundError: If no project has this id
        StorageError: If the project query fails
    """
    try:
        project = session.execute(
            select(Project).where(Project.id == project_id)
        ).scalar_one_or_none()
        result = project_to_dict(project) if project is not None else None
    except SQLAlchemyError as e:
        current_app.logger.error(f"Error fetching project {project_id}: {str(e)}")
        raise StorageError('Error fetching project') from e

    if result is None:
        raise NotFoundError('Project not found')

    result['tech'] = load_tech_map(session, [project_id])[project_id]
    return result
