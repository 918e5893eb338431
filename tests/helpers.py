"""Test data builders shared by unit, integration and API tests."""


def user_payload(n: int | str = 1, **overrides) -> dict:
    """Valid create-user body; n keeps username and email unique."""
    data = {
        "username": f"user{n}",
        "email": f"user{n}@example.com",
        "password": "secret123",
        "first_name": "Test",
        "last_name": "User",
    }
    data.update(overrides)
    return data
