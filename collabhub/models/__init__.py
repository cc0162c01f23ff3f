from collabhub.models.base import Base
from collabhub.models.invite import Invite
from collabhub.models.project import Project, project_collaborators
from collabhub.models.skill import Skill, UserSkill
from collabhub.models.user import User

__all__ = [
    "Base",
    "User",
    "Skill",
    "UserSkill",
    "Project",
    "project_collaborators",
    "Invite",
]
