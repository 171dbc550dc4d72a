from src.domain.permissions import Permissions


def test_includes():
    permissions = Permissions(["records:read"])

    assert permissions.includes("records:read")
    assert not permissions.includes("records:write")
    assert not Permissions().includes("records:read")
