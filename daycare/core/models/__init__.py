from daycare.auth.models import AuthAccount
from daycare.core.models.checklist_record import ChecklistRecord
from daycare.core.models.daily_status import DailyStatus
from daycare.core.models.document import Document, SignatureRequest
from daycare.core.models.invitation import Invitation
from daycare.core.models.organization import Organization
from daycare.core.models.school import School, SchoolMember
from daycare.core.models.user import User

__all__ = [
    "AuthAccount",
    "ChecklistRecord",
    "DailyStatus",
    "Document",
    "Invitation",
    "Organization",
    "School",
    "SchoolMember",
    "SignatureRequest",
    "User",
]
