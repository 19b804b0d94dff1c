from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from jira_story_assistant.relay import proxy
from jira_story_assistant.relay.app import app
from tests.helpers import make_response

client = TestClient(app)

GET = "jira_story_assistant.core.github_client.requests.get"
POST_GITHUB = "jira_story_assistant.core.github_client.requests.post"
POST_JIRA = "jira_story_assistant.core.jira_client.requests.post"

ISSUE = {"owner": "acme", "repo": "widgets", "title": "Add CSV export", "body": "Details", "labels": ["JiraAI"]}
SSO_BODY = ('{"message": "Resource protected by organization SAML enforcement. You must grant your '
            'Personal Access token access to this organization."}')


def post_tracker(body=ISSUE, token="gh-token"):
    headers = {"x-tracker-auth-token": token} if token else {}
    return client.post("/api/tracker/issue", json=body, headers=headers)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


# Jira route

def test_ticketing_forwards_body_with_bearer_token():
    payload = {"fields": {"project": {"key": "PROJ"}, "summary": "S"}}
    with patch(POST_JIRA) as mock_post:
        mock_post.return_value = make_response(201, {"id": "1", "key": "PROJ-1"})
        r = client.post("/api/ticketing/issue", json=payload, headers={"x-ticket-auth-token": "jira-token"})

    assert r.status_code == 201
    assert r.json() == {"id": "1", "key": "PROJ-1"}
    assert mock_post.call_args.kwargs["json"] == payload
    assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Bearer jira-token"
    assert mock_post.call_args.args[0].endswith("/rest/api/2/issue")


def test_ticketing_mirrors_upstream_error_status():
    with patch(POST_JIRA) as mock_post:
        mock_post.return_value = make_response(400, {"errorMessages": ["Project is required"]})
        r = client.post("/api/ticketing/issue", json={}, headers={"x-ticket-auth-token": "t"})

    assert r.status_code == 400
    assert r.json() == {"errorMessages": ["Project is required"]}


def test_ticketing_passes_non_json_through_as_text():
    with patch(POST_JIRA) as mock_post:
        mock_post.return_value = make_response(401, text="<html>Unauthorized</html>")
        r = client.post("/api/ticketing/issue", json={}, headers={"x-ticket-auth-token": "t"})

    assert r.status_code == 401
    assert r.text == "<html>Unauthorized</html>"


def test_ticketing_transport_failure_is_500_envelope():
    with patch(POST_JIRA, side_effect=requests.exceptions.ConnectionError("Name or service not known")):
        r = client.post("/api/ticketing/issue", json={}, headers={"x-ticket-auth-token": "t"})

    assert r.status_code == 500
    assert r.json() == {"error": "Proxy error", "details": "Name or service not known"}


# GitHub route

def test_tracker_requires_token():
    with patch(GET) as mock_get:
        r = post_tracker(token=None)
    assert r.status_code == 400
    assert r.json() == {"error": "GitHub token is required"}
    mock_get.assert_not_called()


def test_tracker_requires_owner_and_repo():
    with patch(GET) as mock_get:
        r = post_tracker(body={**ISSUE, "repo": ""})
    assert r.status_code == 400
    assert r.json() == {"error": "Owner and repo are required"}
    mock_get.assert_not_called()


def test_tracker_creates_issue_after_preflight():
    created = {"number": 12, "html_url": "https://github.com/acme/widgets/issues/12"}
    with patch(GET) as mock_get, patch(POST_GITHUB) as mock_post:
        mock_get.return_value = make_response(200, {"full_name": "acme/widgets"})
        mock_post.return_value = make_response(201, created)
        r = post_tracker()

    assert r.status_code == 201
    assert r.json() == created
    assert mock_get.call_args.args[0] == "https://api.github.com/repos/acme/widgets"
    headers = mock_get.call_args.kwargs["headers"]
    assert headers["Authorization"] == "token gh-token"
    assert headers["Accept"] == "application/vnd.github.v3+json"
    assert mock_post.call_args.args[0] == "https://api.github.com/repos/acme/widgets/issues"
    assert mock_post.call_args.kwargs["json"] == {"title": "Add CSV export", "body": "Details", "labels": ["JiraAI"]}


def test_tracker_omits_empty_labels():
    with patch(GET) as mock_get, patch(POST_GITHUB) as mock_post:
        mock_get.return_value = make_response(200, {})
        mock_post.return_value = make_response(201, {"number": 1})
        post_tracker(body={**ISSUE, "labels": []})

    assert "labels" not in mock_post.call_args.kwargs["json"]


def test_tracker_preflight_not_found():
    with patch(GET) as mock_get, patch(POST_GITHUB) as mock_post:
        mock_get.return_value = make_response(404, {"message": "Not Found"})
        r = post_tracker()

    assert r.status_code == 404
    data = r.json()
    assert data["error"] == "Repository not found or no access"
    assert 'Repository "acme/widgets" not found' in data["details"]
    assert data["status"] == 404
    assert data["rawError"] == '{"message": "Not Found"}'
    mock_post.assert_not_called()


def test_tracker_preflight_unauthorized():
    with patch(GET) as mock_get:
        mock_get.return_value = make_response(401, {"message": "Bad credentials"})
        r = post_tracker()

    assert r.status_code == 401
    assert r.json()["details"].startswith("Authentication failed")


def test_tracker_preflight_other_failure():
    with patch(GET) as mock_get:
        mock_get.return_value = make_response(500, text="oops")
        r = post_tracker()

    assert r.status_code == 500
    assert r.json()["details"] == "Repository acme/widgets is not accessible."


@pytest.mark.parametrize("status", [403, 404, 401])
def test_tracker_preflight_sso_names_organization(status):
    with patch(GET) as mock_get:
        mock_get.return_value = make_response(status, text=SSO_BODY)
        r = post_tracker()

    assert r.status_code == status
    details = r.json()["details"]
    assert "SAML SSO" in details
    assert '"acme" organization' in details
    assert "Configure SSO" in details


def test_tracker_sso_marker_in_json_creation_error():
    with patch(GET) as mock_get, patch(POST_GITHUB) as mock_post:
        mock_get.return_value = make_response(200, {})
        mock_post.return_value = make_response(403, text=SSO_BODY)
        r = post_tracker()

    assert r.status_code == 403
    assert r.json()["samlError"] is True


def test_tracker_sso_marker_in_non_json_creation_error():
    with patch(GET) as mock_get, patch(POST_GITHUB) as mock_post:
        mock_get.return_value = make_response(200, {})
        mock_post.return_value = make_response(403, text="Resource protected by organization SAML enforcement")
        r = post_tracker()

    assert r.status_code == 403
    data = r.json()
    assert data["error"] == "SAML SSO Authorization Required"
    assert data["samlError"] is True
    assert '"acme"' in data["details"]


def test_tracker_non_json_creation_error_passes_through():
    with patch(GET) as mock_get, patch(POST_GITHUB) as mock_post:
        mock_get.return_value = make_response(200, {})
        mock_post.return_value = make_response(502, text="Bad Gateway")
        r = post_tracker()

    assert r.status_code == 502
    assert r.text == "Bad Gateway"


def test_tracker_transport_failure_is_500_envelope():
    with patch(GET, side_effect=requests.exceptions.ConnectionError("Failed to resolve 'api.github.com'")):
        r = post_tracker()

    assert r.status_code == 500
    assert r.json() == {"error": "GitHub proxy error", "details": "Failed to resolve 'api.github.com'"}


def test_proxy_unexpected_exception_is_contained():
    with patch(POST_JIRA, side_effect=RuntimeError("boom")):
        result = proxy.create_ticketing_issue({}, "t")
    assert result.status == 500
    assert result.content == {"error": "Proxy error", "details": "boom"}


def test_classify_prefers_sso_over_status():
    details = proxy.classify_repository_error("acme", "widgets", 404, "organization SAML enforcement")
    assert details == proxy.sso_remediation_message("acme")


def test_tracker_non_string_title_does_not_escape_route():
    with patch(GET) as mock_get, patch(POST_GITHUB) as mock_post:
        mock_get.return_value = make_response(200, {})
        mock_post.return_value = make_response(201, {"number": 5})
        r = post_tracker(body={**ISSUE, "title": 123})

    assert r.status_code == 201
    assert r.json() == {"number": 5}


def test_tracker_unexpected_exception_is_500_envelope():
    with patch(GET, side_effect=RuntimeError("boom")):
        r = post_tracker()

    assert r.status_code == 500
    assert r.json() == {"error": "GitHub proxy error", "details": "boom"}
