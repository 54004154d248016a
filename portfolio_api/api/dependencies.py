"""Route Dependencies — build repositories around the app's DatabaseSessionManager.

Invariants:
    - Repositories are cheap, per-request objects; the manager (and its pool) is shared
    - Tests swap a repository through app.dependency_overrides, or swap the
      whole store by putting another manager on app.state.db
"""

from fastapi import Depends

from portfolio_api.infrastructure.database import DatabaseSessionManager, get_db_manager
from portfolio_api.repositories.about import AboutRepository
from portfolio_api.repositories.contact_message import ContactMessageRepository
from portfolio_api.repositories.project import ProjectRepository
from portfolio_api.repositories.work_experience import WorkExperienceRepository


def get_project_repository(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> ProjectRepository:
    return ProjectRepository(db_manager)


def get_about_repository(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> AboutRepository:
    return AboutRepository(db_manager)


def get_contact_message_repository(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> ContactMessageRepository:
    return ContactMessageRepository(db_manager)


def get_work_experience_repository(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
) -> WorkExperienceRepository:
    return WorkExperienceRepository(db_manager)
