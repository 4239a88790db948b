from extensions import db


class Profile(db.Model):
    __tablename__ = 'profile'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255))
    title = db.Column(db.String(255))
    bio = db.Column(db.Text)
    email = db.Column(db.String(255))
    github = db.Column(db.String(500))
    linkedin = db.Column(db.String(500))
    image_url = db.Column(db.String(500))


class Skill(db.Model):
    __tablename__ = 'skills'
    profile_id = db.Column(db.Integer, db.ForeignKey('profile.id'), primary_key=True)
    skill = db.Column(db.String(255), primary_key=True)


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255))
    description = db.Column(db.Text)
    github = db.Column(db.String(500))
    demo = db.Column(db.String(500))
    image_url = db.Column(db.String(500))


class ProjectTech(db.Model):
    __tablename__ = 'project_tech'
    project_id = db.Column(db.Integer, db.ForeignKey('projects.id'), primary_key=True)
    tech = db.Column(db.String(255), primary_key=True)

    # Tech lookups are always by project
    __table_args__ = (
        db.Index('idx_project_tech_project', 'project_id'),
    )
