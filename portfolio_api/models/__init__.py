"""ORM Models — SQLAlchemy declarative models for the four portfolio tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tables are independent: no foreign keys between them

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before create_all runs
"""

from portfolio_api.models.project import Project  # noqa: F401
from portfolio_api.models.about import About  # noqa: F401
from portfolio_api.models.contact_message import ContactMessage  # noqa: F401
from portfolio_api.models.work_experience import WorkExperience  # noqa: F401
