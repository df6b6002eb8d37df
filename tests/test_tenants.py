import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from daycare.auth.models import AuthAccount
from daycare.auth.security import verify_password
from daycare.core.models import Invitation, Organization, School, User

from tests.factories import auth_headers, error_status, fetch_one, make_account, super_admin_headers


SCHOOL_URL = "/api/v1/functions/createSchool"
ORG_URL = "/api/v1/functions/createOrganization"
ACCEPT_URL = "/api/v1/functions/acceptInvitation"


@pytest.mark.asyncio
async def test_super_admin_creates_standalone_school(client: AsyncClient, db_session: AsyncSession) -> None:
    response = await client.post(
        SCHOOL_URL,
        json={"name": "Sunny Days Daycare!", "adminEmail": "Owner@Example.com", "config": {"capacity": 12}},
        headers=super_admin_headers("root"),
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["schoolId"] == "sunny-days-daycare"
    assert len(data["adminInviteToken"]) == 32

    school = await fetch_one(db_session, School, id="sunny-days-daycare")
    assert school.name == "Sunny Days Daycare!"
    assert school.config == {"capacity": 12}
    assert school.subscription_status == "trial"
    assert (school.trial_ends_at - school.created_at).days == 30
    assert school.organization_id is None

    invite = await fetch_one(db_session, Invitation, id=data["invitationId"])
    assert invite.email == "owner@example.com"
    assert invite.role == "admin"
    assert invite.status == "pending"
    assert invite.school_id == "sunny-days-daycare"
    assert invite.created_by == "root"


@pytest.mark.asyncio
async def test_school_creation_then_admin_accepts(client: AsyncClient, db_session: AsyncSession) -> None:
    created = await client.post(
        SCHOOL_URL, json={"name": "Maple House", "adminEmail": "boss@example.com"}, headers=super_admin_headers()
    )
    accepted = await client.post(ACCEPT_URL, json={"token": created.json()["adminInviteToken"], "password": "pw123456"})
    assert accepted.status_code == 200
    assert accepted.json() == {
        "success": True,
        "uid": accepted.json()["uid"],
        "schoolId": "maple-house",
        "role": "admin",
    }


@pytest.mark.asyncio
async def test_school_without_org_requires_super_admin(client: AsyncClient, db_session: AsyncSession) -> None:
    admin = await make_account(db_session, "admin@example.com", role="admin", organization_id="acme")
    response = await client.post(
        SCHOOL_URL, json={"name": "Maple House", "adminEmail": "x@example.com"}, headers=auth_headers(admin.uid)
    )
    assert response.status_code == 403
    assert error_status(response) == "permission-denied"


@pytest.mark.asyncio
async def test_org_admin_creates_school_in_own_org(client: AsyncClient, db_session: AsyncSession) -> None:
    admin = await make_account(db_session, "admin@example.com", role="admin", organization_id="acme-care")
    response = await client.post(
        SCHOOL_URL,
        json={"name": "Maple House", "adminEmail": "x@example.com", "organizationId": "acme-care"},
        headers=auth_headers(admin.uid),
    )
    assert response.status_code == 200
    assert response.json()["schoolId"] == "maple-house_acme-care"

    school = await fetch_one(db_session, School, id="maple-house_acme-care")
    assert school.organization_id == "acme-care"
    invite = await fetch_one(db_session, Invitation, school_id="maple-house_acme-care")
    assert invite.organization_id == "acme-care"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "role,organization_id",
    [("admin", "other-org"), ("teacher", "acme-care"), ("admin", None)],
)
async def test_org_school_rejects_non_admins_of_that_org(
    client: AsyncClient, db_session: AsyncSession, role, organization_id
) -> None:
    caller = await make_account(db_session, "caller@example.com", role=role, organization_id=organization_id)
    response = await client.post(
        SCHOOL_URL,
        json={"name": "Maple House", "adminEmail": "x@example.com", "organizationId": "acme-care"},
        headers=auth_headers(caller.uid),
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_school_slug_collision(client: AsyncClient, db_session: AsyncSession) -> None:
    first = await client.post(
        SCHOOL_URL, json={"name": "Little Stars", "adminEmail": "a@example.com"}, headers=super_admin_headers()
    )
    assert first.status_code == 200

    second = await client.post(
        SCHOOL_URL, json={"name": "little   STARS!!", "adminEmail": "b@example.com"}, headers=super_admin_headers()
    )
    assert second.status_code == 409
    assert error_status(second) == "already-exists"

    # Same name under an organization is a different id
    scoped = await client.post(
        SCHOOL_URL,
        json={"name": "Little Stars", "adminEmail": "c@example.com", "organizationId": "acme"},
        headers=super_admin_headers(),
    )
    assert scoped.status_code == 200
    assert scoped.json()["schoolId"] == "little-stars_acme"


@pytest.mark.asyncio
async def test_school_requires_name_and_email(client: AsyncClient, db_session: AsyncSession) -> None:
    missing = await client.post(SCHOOL_URL, json={"name": "X"}, headers=super_admin_headers())
    assert missing.status_code == 400
    symbols = await client.post(SCHOOL_URL, json={"name": "!!!", "adminEmail": "a@example.com"}, headers=super_admin_headers())
    assert symbols.status_code == 400
    assert error_status(symbols) == "invalid-argument"


@pytest.mark.asyncio
async def test_school_requires_authentication(client: AsyncClient) -> None:
    response = await client.post(SCHOOL_URL, json={"name": "X", "adminEmail": "a@example.com"})
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_create_organization_with_new_admin(client: AsyncClient, db_session: AsyncSession) -> None:
    response = await client.post(
        ORG_URL,
        json={"name": "Acme Care Group", "adminEmail": "Boss@Example.com", "password": "StrongPass123"},
        headers=super_admin_headers("root"),
    )
    assert response.status_code == 200
    data = response.json()
    assert data["organizationId"] == "acme-care-group"

    org = await fetch_one(db_session, Organization, id="acme-care-group")
    assert org.name == "Acme Care Group"
    assert org.created_by == "root"

    account = await fetch_one(db_session, AuthAccount, uid=data["uid"])
    assert account.email == "boss@example.com"
    assert account.display_name == "Admin"
    assert verify_password("StrongPass123", account.password_hash)

    profile = await fetch_one(db_session, User, uid=data["uid"])
    assert profile.role == "admin"
    assert profile.organization_id == "acme-care-group"
    assert profile.name == "Admin"
    assert profile.username == "boss"
    assert profile.school_ids == []

    # No invitation step for organization owners
    assert await fetch_one(db_session, Invitation, email="boss@example.com") is None


@pytest.mark.asyncio
async def test_create_organization_reuses_existing_account(client: AsyncClient, db_session: AsyncSession) -> None:
    existing = await make_account(db_session, "boss@example.com", role="teacher", password="original", name="Jane")
    response = await client.post(
        ORG_URL,
        json={"name": "Acme", "adminEmail": "boss@example.com", "password": "ignored"},
        headers=super_admin_headers(),
    )
    assert response.status_code == 200
    assert response.json()["uid"] == existing.uid

    account = await fetch_one(db_session, AuthAccount, uid=existing.uid)
    assert verify_password("original", account.password_hash)

    profile = await fetch_one(db_session, User, uid=existing.uid)
    assert profile.role == "admin"
    assert profile.organization_id == "acme"
    assert profile.name == "Jane"
    assert profile.updated_at is not None


@pytest.mark.asyncio
async def test_create_organization_collision(client: AsyncClient, db_session: AsyncSession) -> None:
    payload = {"name": "Acme", "adminEmail": "a@example.com", "password": "pw"}
    assert (await client.post(ORG_URL, json=payload, headers=super_admin_headers())).status_code == 200
    second = await client.post(ORG_URL, json={**payload, "name": "ACME"}, headers=super_admin_headers())
    assert second.status_code == 409
    assert error_status(second) == "already-exists"


@pytest.mark.asyncio
async def test_create_organization_requires_super_admin(client: AsyncClient, db_session: AsyncSession) -> None:
    admin = await make_account(db_session, "admin@example.com", role="admin")
    response = await client.post(
        ORG_URL,
        json={"name": "Acme", "adminEmail": "a@example.com", "password": "pw"},
        headers=auth_headers(admin.uid),
    )
    assert response.status_code == 403

    anonymous = await client.post(ORG_URL, json={"name": "Acme", "adminEmail": "a@example.com", "password": "pw"})
    assert anonymous.status_code == 401


@pytest.mark.asyncio
async def test_create_organization_requires_fields(client: AsyncClient, db_session: AsyncSession) -> None:
    response = await client.post(ORG_URL, json={"name": "Acme", "adminEmail": "a@example.com"}, headers=super_admin_headers())
    assert response.status_code == 400
    assert error_status(response) == "invalid-argument"


@pytest.mark.asyncio
async def test_create_organization_accepts_provisioned_login(client: AsyncClient, db_session: AsyncSession) -> None:
    existing = await make_account(db_session, "jane@daycare.local", role="teacher")
    response = await client.post(
        ORG_URL,
        json={"name": "Acme", "adminEmail": "jane@daycare.local", "password": "ignored"},
        headers=super_admin_headers(),
    )
    assert response.status_code == 200
    assert response.json()["uid"] == existing.uid

    school = await client.post(
        SCHOOL_URL,
        json={"name": "Maple House", "adminEmail": "jane@daycare.local", "organizationId": "acme"},
        headers=super_admin_headers(),
    )
    assert school.status_code == 200
    invite = await fetch_one(db_session, Invitation, id=school.json()["invitationId"])
    assert invite.email == "jane@daycare.local"
