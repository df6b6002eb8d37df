from enum import Enum


class ErrorCode(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    PERMISSION_DENIED = "permission-denied"
    INVALID_ARGUMENT = "invalid-argument"
    NOT_FOUND = "not-found"
    ALREADY_EXISTS = "already-exists"
    INTERNAL = "internal"


class UserRole(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"
    ADMIN = "admin"
    PARENT = "parent"
    # Generic role for invited users; school roles live on memberships
    USER = "user"


class InvitationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"


class SubscriptionStatus(str, Enum):
    TRIAL = "trial"
    ACTIVE = "active"
    CANCELLED = "cancelled"


class LookupStatus(str, Enum):
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


# Roles an admin may assign through adminCreateUser
PROVISIONABLE_ROLES = (UserRole.TEACHER, UserRole.STUDENT, UserRole.ADMIN)

# Roles a school admin may invite
INVITABLE_ROLES = (UserRole.ADMIN, UserRole.TEACHER, UserRole.PARENT)

NOT_ARRIVED = "NotArrived"
SYSTEM_SUBMITTER = "system"
