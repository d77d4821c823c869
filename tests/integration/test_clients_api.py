"""
API tests for clients and projects.
"""

API = "/api/v1"


def create_client(client, headers, name, **fields):
    response = client.post(f"{API}/clients", json={"name": name, **fields}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def create_project(client, headers, client_id, title="Website", hourly_rate="50.00"):
    response = client.post(
        f"{API}/projects",
        json={"client_id": client_id, "title": title, "hourly_rate": hourly_rate},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestAuthentication:

    def test_health_is_public(self, client):
        response = client.get(f"{API}/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_missing_token_is_rejected(self, client):
        response = client.get(f"{API}/clients")

        assert response.status_code == 401

    def test_garbage_token_is_rejected(self, client):
        response = client.get(f"{API}/clients", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    def test_request_id_is_echoed(self, client, alice):
        response = client.get(f"{API}/clients", headers={**alice, "X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"


class TestClientsApi:

    def test_create_and_get_client(self, client, alice):
        created = create_client(client, alice, "Acme", email="billing@acme.test")

        response = client.get(f"{API}/clients/{created['id']}", headers=alice)

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Acme"
        assert body["owner_id"] == "user-alice"
        assert body["is_active"] is True
        assert body["version"] == 1

    def test_duplicate_name_is_case_insensitive(self, client, alice):
        create_client(client, alice, "Acme")

        response = client.post(f"{API}/clients", json={"name": "ACME"}, headers=alice)

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "DUPLICATE_ENTITY"

    def test_name_availability(self, client, alice):
        existing = create_client(client, alice, "Acme")

        taken = client.get(f"{API}/clients/name-available", params={"name": "acme"}, headers=alice)
        own = client.get(
            f"{API}/clients/name-available",
            params={"name": "acme", "exclude_id": existing["id"]},
            headers=alice,
        )

        assert taken.json()["available"] is False
        assert own.json()["available"] is True

    def test_stale_version_conflicts(self, client, alice):
        created = create_client(client, alice, "Acme")
        first = client.put(
            f"{API}/clients/{created['id']}", json={"name": "Acme Corp", "version": 1}, headers=alice
        )
        assert first.status_code == 200
        assert first.json()["version"] == 2

        stale = client.put(
            f"{API}/clients/{created['id']}", json={"name": "Acme Inc", "version": 1}, headers=alice
        )

        assert stale.status_code == 409
        assert stale.json()["detail"]["error_code"] == "CONCURRENCY_CONFLICT"

    def test_wildcard_search(self, client, alice):
        create_client(client, alice, "TechCorp")
        create_client(client, alice, "Acme", notes="tech partner")
        create_client(client, alice, "Globex")

        response = client.get(f"{API}/clients", params={"search": "Tech*"}, headers=alice)

        names = sorted(item["name"] for item in response.json())
        assert names == ["Acme", "TechCorp"]

    def test_percent_and_underscore_are_literal(self, client, alice):
        create_client(client, alice, "100% Design")
        create_client(client, alice, "1000 Designs")
        create_client(client, alice, "a_b Studio")
        create_client(client, alice, "axb Studio")

        percent = client.get(f"{API}/clients", params={"search": "100%"}, headers=alice)
        underscore = client.get(f"{API}/clients", params={"search": "a_b"}, headers=alice)

        assert [item["name"] for item in percent.json()] == ["100% Design"]
        assert [item["name"] for item in underscore.json()] == ["a_b Studio"]

    def test_delete_without_dependents_removes_client(self, client, alice):
        created = create_client(client, alice, "Acme")

        response = client.delete(f"{API}/clients/{created['id']}", headers=alice)

        assert response.status_code == 200
        assert response.json()["outcome"] == "hard_deleted"
        assert client.get(f"{API}/clients/{created['id']}", headers=alice).status_code == 404

    def test_delete_with_projects_deactivates_client(self, client, alice):
        created = create_client(client, alice, "Acme")
        create_project(client, alice, created["id"])

        response = client.delete(f"{API}/clients/{created['id']}", headers=alice)

        assert response.status_code == 200
        assert response.json()["outcome"] == "deactivated"
        active = client.get(f"{API}/clients", headers=alice).json()
        everything = client.get(f"{API}/clients", params={"include_inactive": True}, headers=alice).json()
        assert active == []
        assert [item["is_active"] for item in everything] == [False]

    def test_reactivate_client(self, client, alice):
        created = create_client(client, alice, "Acme")
        client.post(f"{API}/clients/{created['id']}/deactivate", headers=alice)

        response = client.post(f"{API}/clients/{created['id']}/reactivate", headers=alice)

        assert response.status_code == 200
        assert response.json()["is_active"] is True


class TestTenantIsolation:

    def test_other_users_clients_are_invisible(self, client, alice, bob):
        created = create_client(client, alice, "Acme")

        assert client.get(f"{API}/clients", headers=bob).json() == []
        assert client.get(f"{API}/clients/{created['id']}", headers=bob).status_code == 404
        update = client.put(f"{API}/clients/{created['id']}", json={"name": "Mine now"}, headers=bob)
        assert update.status_code == 404
        assert client.get(f"{API}/clients/{created['id']}", headers=alice).json()["name"] == "Acme"

    def test_same_name_is_allowed_for_different_users(self, client, alice, bob):
        create_client(client, alice, "Acme")

        create_client(client, bob, "Acme")

    def test_cannot_attach_project_to_foreign_client(self, client, alice, bob):
        created = create_client(client, alice, "Acme")

        response = client.post(
            f"{API}/projects",
            json={"client_id": created["id"], "title": "Sneaky", "hourly_rate": "10"},
            headers=bob,
        )

        assert response.status_code == 422
        assert response.json()["detail"]["error_code"] == "VALIDATION_ERROR"

    def test_foreign_owner_id_in_payload_is_forbidden(self, client, alice):
        created = create_client(client, alice, "Acme")

        response = client.put(
            f"{API}/clients/{created['id']}",
            json={"name": "Acme", "owner_id": "user-bob"},
            headers=alice,
        )

        assert response.status_code == 403


class TestProjectsApi:

    def test_project_requires_active_client(self, client, alice):
        created = create_client(client, alice, "Acme")
        client.post(f"{API}/clients/{created['id']}/deactivate", headers=alice)

        response = client.post(
            f"{API}/projects",
            json={"client_id": created["id"], "title": "Website", "hourly_rate": "50"},
            headers=alice,
        )

        assert response.status_code == 422
        assert response.json()["detail"]["message"] == "Please select an active client"

    def test_unknown_client_is_not_valid(self, client, alice):
        response = client.post(
            f"{API}/projects",
            json={"client_id": 999, "title": "Website", "hourly_rate": "50"},
            headers=alice,
        )

        assert response.status_code == 422
        assert response.json()["detail"]["message"] == "Please select a valid client"

    def test_search_matches_client_name(self, client, alice):
        acme = create_client(client, alice, "Acme")
        globex = create_client(client, alice, "Globex")
        create_project(client, alice, acme["id"], title="Website")
        create_project(client, alice, globex["id"], title="Warehouse")

        projects = client.get(f"{API}/projects", params={"search": "GLOB"}, headers=alice).json()

        assert [item["title"] for item in projects] == ["Warehouse"]

    def test_projects_are_ordered_by_title(self, client, alice):
        acme = create_client(client, alice, "Acme")
        for title in ("Website", "Api", "Mobile App"):
            create_project(client, alice, acme["id"], title=title)

        projects = client.get(f"{API}/projects", headers=alice).json()

        assert [item["title"] for item in projects] == ["Api", "Mobile App", "Website"]

    def test_project_lists_client_name(self, client, alice):
        created = create_client(client, alice, "Acme")
        create_project(client, alice, created["id"])

        projects = client.get(f"{API}/projects", headers=alice).json()

        assert [(item["title"], item["client_name"]) for item in projects] == [("Website", "Acme")]

    def test_project_with_time_cannot_be_deleted(self, client, alice):
        created = create_client(client, alice, "Acme")
        project = create_project(client, alice, created["id"])
        entry = client.post(
            f"{API}/time-entries",
            json={
                "project_id": project["id"],
                "start_time": "2026-01-05T09:00:00",
                "end_time": "2026-01-05T10:00:00",
                "description": "Kickoff",
            },
            headers=alice,
        )
        assert entry.status_code == 201, entry.text

        response = client.delete(f"{API}/projects/{project['id']}", headers=alice)

        assert response.status_code == 409
        assert response.json()["detail"]["error_code"] == "DELETE_BLOCKED"

    def test_empty_project_is_deleted(self, client, alice):
        created = create_client(client, alice, "Acme")
        project = create_project(client, alice, created["id"])

        response = client.delete(f"{API}/projects/{project['id']}", headers=alice)

        assert response.status_code == 204
        assert client.get(f"{API}/projects/{project['id']}", headers=alice).status_code == 404
