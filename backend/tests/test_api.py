"""HTTP tests for the record endpoints."""

import json

from structlog.testing import capture_logs

from app.core.constants import ErrorKind

POLICY = {
    "id": "read-open",
    "description": "read anything open",
    "resource_paths": ["/open"],
    "role_ids": ["reader"],
}


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


class TestCreatePolicy:
    def test_created(self, client):
        resp = client.post("/api/v1/policy/", json=POLICY)

        assert resp.status_code == 201
        assert resp.json() == {"created": POLICY}

    def test_optional_description_may_be_absent(self, client):
        body = {k: v for k, v in POLICY.items() if k != "description"}

        resp = client.post("/api/v1/policy/", json=body)

        assert resp.status_code == 201
        assert resp.json()["created"]["description"] == ""

    def test_missing_field(self, client):
        body = {k: v for k, v in POLICY.items() if k != "role_ids"}

        resp = client.post("/api/v1/policy/", json=body)

        assert resp.status_code == 400
        assert resp.json() == {
            "error": {
                "message": "JSON missing required fields for policy: role_ids",
                "code": 400,
            }
        }

    def test_unexpected_field(self, client):
        resp = client.post("/api/v1/policy/", json={**POLICY, "admin": True})

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == (
            "JSON contains unexpected fields for policy: admin"
        )

    def test_missing_reported_before_unexpected(self, client):
        body = {k: v for k, v in POLICY.items() if k != "id"}
        body["admin"] = True

        resp = client.post("/api/v1/policy/", json=body)

        assert resp.json()["error"]["message"] == "JSON missing required fields for policy: id"

    def test_wrong_types(self, client):
        resp = client.post("/api/v1/policy/", json={**POLICY, "role_ids": "reader"})

        assert resp.status_code == 400
        message = resp.json()["error"]["message"]
        assert message == "could not parse Policy from JSON; make sure input has correct types"

    def test_malformed_body(self, client):
        resp = client.post(
            "/api/v1/policy/",
            content=b'{"id": "p1",',
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert "Policy" in resp.json()["error"]["message"]

    def test_deeply_nested_body(self, client):
        body = (
            b'{"id": "p1", "role_ids": [], "resource_paths": '
            + b"[" * 200000
            + b"]" * 200000
            + b"}"
        )

        resp = client.post(
            "/api/v1/policy/",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert resp.status_code == 400
        assert resp.json()["error"]["message"] == (
            "could not parse Policy from JSON; make sure input has correct types"
        )

    def test_rejection_is_logged(self, client):
        with capture_logs() as logs:
            client.post("/api/v1/policy/", json={"id": "p1"})

        rejected = [entry for entry in logs if entry["event"] == "request body rejected"]
        assert len(rejected) == 1
        assert rejected[0]["kind"] == ErrorKind.MISSING_REQUIRED_FIELDS
        assert rejected[0]["path"] == "/api/v1/policy/"

    def test_duplicate_conflicts(self, client):
        client.post("/api/v1/policy/", json=POLICY)

        resp = client.post("/api/v1/policy/", json=POLICY)

        assert resp.status_code == 409
        assert resp.json()["error"]["code"] == 409


class TestReadRecords:
    def test_read_policy(self, client):
        client.post("/api/v1/policy/", json=POLICY)

        resp = client.get("/api/v1/policy/read-open")

        assert resp.status_code == 200
        assert resp.json() == POLICY

    def test_unknown_policy(self, client):
        resp = client.get("/api/v1/policy/nope")

        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == 404

    def test_list_policies(self, client):
        client.post("/api/v1/policy/", json=POLICY)

        resp = client.get("/api/v1/policy/")

        assert resp.json() == {"policies": ["read-open"]}


class TestOtherRecords:
    def test_role_with_permissions(self, client):
        role = {
            "id": "reader",
            "permissions": [
                {"id": "read", "action": {"service": "*", "method": "read"}},
            ],
        }

        resp = client.post("/api/v1/role/", json=role)

        assert resp.status_code == 201
        permission = resp.json()["created"]["permissions"][0]
        assert permission["action"] == {"service": "*", "method": "read"}
        assert permission["constraints"] == {}

    def test_role_with_badly_typed_permission(self, client):
        role = {"id": "reader", "permissions": [{"id": "read", "action": "read"}]}

        resp = client.post("/api/v1/role/", json=role)

        assert resp.status_code == 400
        assert "Role" in resp.json()["error"]["message"]

    def test_resource_path_defaults_from_name(self, client):
        resource = {"name": "programs", "subresources": [{"name": "open"}]}

        assert client.post("/api/v1/resource/", json=resource).status_code == 201
        resp = client.get("/api/v1/resource/programs")

        assert resp.status_code == 200
        assert resp.json()["subresources"][0]["name"] == "open"

    def test_client_uses_camel_case_key(self, client):
        resp = client.post("/api/v1/client/", json={"clientID": "abc", "policies": []})

        assert resp.status_code == 201
        assert resp.json() == {"created": {"clientID": "abc", "policies": []}}

    def test_client_snake_case_key_is_unexpected(self, client):
        resp = client.post("/api/v1/client/", json={"clientID": "abc", "client_id": "abc"})

        assert resp.json()["error"]["message"] == (
            "JSON contains unexpected fields for client: client_id"
        )

    def test_user_and_group(self, client):
        assert client.post("/api/v1/user/", json={"name": "alice"}).status_code == 201
        assert client.post(
            "/api/v1/group/", json={"name": "admins", "users": ["alice"]}
        ).status_code == 201

        assert client.get("/api/v1/user/alice").json()["name"] == "alice"
        assert client.get("/api/v1/group/admins").json()["users"] == ["alice"]


class TestEngine:
    def test_serialize(self, client):
        client.post("/api/v1/policy/", json=POLICY)
        client.post("/api/v1/user/", json={"name": "alice"})

        body = client.get("/api/v1/engine/").json()

        assert body["policies"] == [POLICY]
        assert body["users"][0]["name"] == "alice"
        assert body["roles"] == []

    def test_pretty(self, client):
        resp = client.get("/api/v1/engine/?pretty=true")

        assert resp.text == json.dumps(resp.json(), indent=4)

    def test_compact_by_default(self, client):
        resp = client.get("/api/v1/engine/")

        assert "\n" not in resp.text

    def test_pretty_error(self, client):
        resp = client.get("/api/v1/policy/nope?pretty=true")

        assert resp.status_code == 404
        assert resp.headers["content-type"] == "application/json"
        assert resp.text == json.dumps(resp.json(), indent=4)


class TestRoutingErrors:
    def test_unknown_route_uses_error_envelope(self, client):
        resp = client.get("/api/v1/nothing-here")

        assert resp.status_code == 404
        assert resp.json() == {"error": {"message": "Not Found", "code": 404}}

    def test_wrong_method_uses_error_envelope(self, client):
        resp = client.delete("/api/v1/policy/")

        assert resp.status_code == 405
        assert resp.json() == {"error": {"message": "Method Not Allowed", "code": 405}}
        assert "allow" in resp.headers
