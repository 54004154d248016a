"""Work Experience Repository — CRUD for work_experiences, newest start_date first."""

from portfolio_api.models.work_experience import WorkExperience
from portfolio_api.repositories.base import EntityRepository


class WorkExperienceRepository(EntityRepository[WorkExperience]):
    model = WorkExperience
    resource_name = "Experience"

    def _list_order(self) -> tuple:
        # id breaks ties between positions that started the same day
        return (WorkExperience.start_date.desc(), WorkExperience.id.desc())
