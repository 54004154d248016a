"""Project Repository — CRUD for the projects table in insertion (id) order."""

from portfolio_api.models.project import Project
from portfolio_api.repositories.base import EntityRepository


class ProjectRepository(EntityRepository[Project]):
    model = Project
    resource_name = "Project"
