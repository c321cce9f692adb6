"""API tests for POST /api/v1/token-validations.

Covers validate-only, validate-and-mark, the ordered failure checks and
their HTTP statuses (404, 403 for mismatch/used/expired).
"""

import pytest

from src.core.timestamps import to_epoch_millis
from tests.conftest import OTHER_EMAIL, START_TIME, STUDENT_EMAIL

ISSUE_URL = "/api/v1/activation-tokens"
URL = "/api/v1/token-validations"


def _issue(client, email=STUDENT_EMAIL) -> str:
    return client.post(ISSUE_URL, json={"email": email}).json()["token"]


@pytest.mark.api
class TestCreateTokenValidation:
    def test_validate_without_marking(self, api_client):
        token = _issue(api_client)

        response = api_client.post(URL, json={"email": STUDENT_EMAIL, "token": token})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "isValid": True,
            "token": token,
            "email": STUDENT_EMAIL,
            "purpose": "activation",
            "expiresAt": to_epoch_millis(START_TIME) + 1_800_000,
        }

    def test_validate_mark_then_reject(self, api_client):
        token = _issue(api_client)
        body = {"email": STUDENT_EMAIL, "token": token}

        first = api_client.post(URL, json=body)
        second = api_client.post(URL, json=body | {"markAsUsed": True})
        third = api_client.post(URL, json=body)

        assert first.status_code == 200
        assert second.status_code == 200
        assert third.status_code == 403
        assert third.json()["code"] == "token_used"
        assert third.json()["kind"] == "permission_denied"

    def test_snake_case_flag_accepted(self, api_client, store):
        token = _issue(api_client)

        api_client.post(
            URL, json={"email": STUDENT_EMAIL, "token": token, "mark_as_used": True}
        )

        assert api_client.post(
            URL, json={"email": STUDENT_EMAIL, "token": token}
        ).json()["code"] == "token_used"

    def test_non_boolean_flag_does_not_mark(self, api_client):
        token = _issue(api_client)
        body = {"email": STUDENT_EMAIL, "token": token}

        api_client.post(URL, json=body | {"markAsUsed": "yes"})

        assert api_client.post(URL, json=body).status_code == 200

    def test_unknown_token(self, api_client):
        response = api_client.post(URL, json={"email": STUDENT_EMAIL, "token": "999999"})

        assert response.status_code == 404
        assert response.json()["code"] == "token_not_found"

    def test_email_mismatch(self, api_client):
        token = _issue(api_client, email=OTHER_EMAIL)

        response = api_client.post(URL, json={"email": STUDENT_EMAIL, "token": token})

        assert response.status_code == 403
        assert response.json()["code"] == "token_mismatch"

    def test_expired_token(self, api_client, clock):
        token = _issue(api_client)
        clock.advance(minutes=31)

        response = api_client.post(URL, json={"email": STUDENT_EMAIL, "token": token})

        assert response.status_code == 403
        data = response.json()
        assert data["kind"] == "deadline_exceeded"
        assert data["code"] == "token_expired"

    @pytest.mark.parametrize(
        "body",
        [{}, {"email": STUDENT_EMAIL}, {"token": "482913"}],
    )
    def test_missing_fields(self, api_client, body):
        response = api_client.post(URL, json=body)

        assert response.status_code == 400
        assert response.json()["code"] == "missing_fields"
