"""Database models.

Importing this package registers every table on BaseModel.metadata
(used by Database.create_all and alembic autogenerate).
"""

from schoolvault.infrastructure.persistence.models.access_request import (
    AccessRequestModel,
)
from schoolvault.infrastructure.persistence.models.account import AccountModel
from schoolvault.infrastructure.persistence.models.institution import (
    InstitutionModel,
)
from schoolvault.infrastructure.persistence.models.membership import MembershipModel
from schoolvault.infrastructure.persistence.models.occurrence import (
    OccurrenceModel,
    OccurrenceTypeModel,
)
from schoolvault.infrastructure.persistence.models.school_class import (
    SchoolClassModel,
)
from schoolvault.infrastructure.persistence.models.student import StudentModel

__all__ = [
    "AccessRequestModel",
    "AccountModel",
    "InstitutionModel",
    "MembershipModel",
    "OccurrenceModel",
    "OccurrenceTypeModel",
    "SchoolClassModel",
    "StudentModel",
]
