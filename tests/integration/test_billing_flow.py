"""
API tests for time tracking, invoicing and the dashboard.
"""

from datetime import datetime
from decimal import Decimal

API = "/api/v1"


def setup_billable_work(client, headers):
    acme = client.post(f"{API}/clients", json={"name": "Acme"}, headers=headers).json()
    website = client.post(
        f"{API}/projects",
        json={"client_id": acme["id"], "title": "Website", "hourly_rate": "50.00"},
        headers=headers,
    ).json()
    entry = client.post(
        f"{API}/time-entries",
        json={
            "project_id": website["id"],
            "start_time": "2026-01-05T09:00:00",
            "end_time": "2026-01-05T11:00:00",
            "description": "Homepage layout",
        },
        headers=headers,
    )
    assert entry.status_code == 201, entry.text
    return acme, website, entry.json()


class TestTimeEntriesApi:

    def test_entry_reports_duration_and_amount(self, client, alice):
        _, website, entry = setup_billable_work(client, alice)

        assert entry["project_title"] == "Website"
        assert entry["client_name"] == "Acme"
        assert Decimal(entry["duration_hours"]) == Decimal("2")
        assert Decimal(entry["amount"]) == Decimal("100")
        assert entry["is_billed"] is False

    def test_end_before_start_is_rejected(self, client, alice):
        _, website, _ = setup_billable_work(client, alice)

        response = client.post(
            f"{API}/time-entries",
            json={
                "project_id": website["id"],
                "start_time": "2026-01-05T11:00:00",
                "end_time": "2026-01-05T09:00:00",
                "description": "Backwards",
            },
            headers=alice,
        )

        assert response.status_code == 422

    def test_aware_times_are_stored_as_utc(self, client, alice):
        _, website, _ = setup_billable_work(client, alice)

        response = client.post(
            f"{API}/time-entries",
            json={
                "project_id": website["id"],
                "start_time": "2026-01-05T09:00:00+02:00",
                "end_time": "2026-01-05T10:00:00+02:00",
                "description": "Call",
            },
            headers=alice,
        )

        assert datetime.fromisoformat(response.json()["start_time"]) == datetime(2026, 1, 5, 7, 0)

    def test_toggle_billed(self, client, alice):
        _, _, entry = setup_billable_work(client, alice)

        first = client.post(f"{API}/time-entries/{entry['id']}/toggle-billed", headers=alice)
        second = client.post(f"{API}/time-entries/{entry['id']}/toggle-billed", headers=alice)

        assert first.json()["is_billed"] is True
        assert second.json()["is_billed"] is False

    def test_foreign_project_is_rejected(self, client, alice, bob):
        _, website, _ = setup_billable_work(client, alice)

        response = client.post(
            f"{API}/time-entries",
            json={
                "project_id": website["id"],
                "start_time": "2026-01-05T09:00:00",
                "end_time": "2026-01-05T10:00:00",
                "description": "Not mine",
            },
            headers=bob,
        )

        assert response.status_code == 422

    def test_search_matches_project_title(self, client, alice):
        acme, website, entry = setup_billable_work(client, alice)
        mobile = client.post(
            f"{API}/projects",
            json={"client_id": acme["id"], "title": "Mobile App", "hourly_rate": "60.00"},
            headers=alice,
        ).json()
        client.post(
            f"{API}/time-entries",
            json={
                "project_id": mobile["id"],
                "start_time": "2026-01-06T09:00:00",
                "end_time": "2026-01-06T10:00:00",
                "description": "Login screen",
            },
            headers=alice,
        )

        found = client.get(f"{API}/time-entries", params={"search": "websi"}, headers=alice).json()

        assert [item["id"] for item in found] == [entry["id"]]

    def test_description_assistant_disabled_by_default(self, client, alice):
        response = client.post(
            f"{API}/time-entries/generate-description", json={"prompt": "design review"}, headers=alice
        )

        assert response.status_code == 503
        assert response.json()["detail"]["error_code"] == "AI_DISABLED"


class TestInvoicesApi:

    def test_numbers_follow_yearly_sequence(self, client, alice):
        acme, _, _ = setup_billable_work(client, alice)
        year = datetime.utcnow().year

        first = client.post(f"{API}/invoices", json={"client_id": acme["id"], "total_amount": "10"}, headers=alice)
        second = client.post(f"{API}/invoices", json={"client_id": acme["id"], "total_amount": "20"}, headers=alice)
        preview = client.get(f"{API}/invoices/number-preview", headers=alice)

        assert first.json()["invoice_number"] == f"INV-{year}-001"
        assert second.json()["invoice_number"] == f"INV-{year}-002"
        assert preview.json()["invoice_number"] == f"INV-{year}-003"

    def test_numbering_is_per_user(self, client, alice, bob):
        acme, _, _ = setup_billable_work(client, alice)
        globex = client.post(f"{API}/clients", json={"name": "Globex"}, headers=bob).json()
        year = datetime.utcnow().year

        client.post(f"{API}/invoices", json={"client_id": acme["id"], "total_amount": "10"}, headers=alice)
        bobs = client.post(f"{API}/invoices", json={"client_id": globex["id"], "total_amount": "10"}, headers=bob)

        assert bobs.json()["invoice_number"] == f"INV-{year}-001"

    def test_duplicate_explicit_number_conflicts(self, client, alice):
        acme, _, _ = setup_billable_work(client, alice)
        payload = {"client_id": acme["id"], "total_amount": "10", "invoice_number": "ACME-1"}

        client.post(f"{API}/invoices", json=payload, headers=alice)
        response = client.post(f"{API}/invoices", json=payload, headers=alice)

        assert response.status_code == 409

    def test_hand_typed_suffix_does_not_stall_numbering(self, client, alice):
        acme, _, _ = setup_billable_work(client, alice)
        year = datetime.utcnow().year

        first = client.post(f"{API}/invoices", json={"client_id": acme["id"], "total_amount": "10"}, headers=alice)
        custom = client.post(
            f"{API}/invoices",
            json={"client_id": acme["id"], "total_amount": "10", "invoice_number": f"INV-{year}-001-A"},
            headers=alice,
        )
        preview = client.get(f"{API}/invoices/number-preview", headers=alice)
        second = client.post(f"{API}/invoices", json={"client_id": acme["id"], "total_amount": "10"}, headers=alice)

        assert first.json()["invoice_number"] == f"INV-{year}-001"
        assert custom.status_code == 201
        assert preview.json()["invoice_number"] == f"INV-{year}-002"
        assert second.status_code == 201
        assert second.json()["invoice_number"] == f"INV-{year}-002"

    def test_search_matches_number_and_client_name(self, client, alice):
        acme, _, _ = setup_billable_work(client, alice)
        globex = client.post(f"{API}/clients", json={"name": "Globex"}, headers=alice).json()
        client.post(
            f"{API}/invoices",
            json={"client_id": acme["id"], "total_amount": "10", "invoice_number": "ACME-7"},
            headers=alice,
        )
        client.post(
            f"{API}/invoices",
            json={"client_id": globex["id"], "total_amount": "10", "invoice_number": "GX-1"},
            headers=alice,
        )

        by_number = client.get(f"{API}/invoices", params={"search": "acme-7"}, headers=alice).json()
        by_client = client.get(f"{API}/invoices", params={"search": "glob*"}, headers=alice).json()

        assert [invoice["invoice_number"] for invoice in by_number] == ["ACME-7"]
        assert [invoice["invoice_number"] for invoice in by_client] == ["GX-1"]

    def test_entry_late_on_end_date_is_included(self, client, alice):
        acme, website, entry = setup_billable_work(client, alice)
        late = client.post(
            f"{API}/time-entries",
            json={
                "project_id": website["id"],
                "start_time": "2026-01-31T22:00:00",
                "end_time": "2026-01-31T23:00:00",
                "description": "Late deploy",
            },
            headers=alice,
        ).json()

        preview = client.post(
            f"{API}/invoices/generate-from-time-entries",
            json={"client_id": acme["id"], "start_date": "2026-01-05", "end_date": "2026-01-31"},
            headers=alice,
        ).json()

        assert preview["time_entry_ids"] == [entry["id"], late["id"]]
        assert Decimal(preview["total_amount"]) == Decimal("150")

    def test_no_unbilled_time_in_range(self, client, alice):
        acme, _, _ = setup_billable_work(client, alice)

        response = client.post(
            f"{API}/invoices/generate-from-time-entries",
            json={"client_id": acme["id"], "start_date": "2025-01-01", "end_date": "2025-01-31"},
            headers=alice,
        )

        assert response.status_code == 422
        assert response.json()["detail"]["message"] == "No unbilled time entries found for the selected criteria."

    def test_invoiced_entry_cannot_be_deleted(self, client, alice):
        acme, _, entry = setup_billable_work(client, alice)
        invoice = client.post(
            f"{API}/invoices",
            json={"client_id": acme["id"], "total_amount": "100", "time_entry_ids": [entry["id"]]},
            headers=alice,
        )
        assert invoice.json()["time_entry_ids"] == [entry["id"]]

        response = client.delete(f"{API}/time-entries/{entry['id']}", headers=alice)

        assert response.status_code == 409

    def test_deleting_invoice_keeps_time_entries(self, client, alice):
        acme, _, entry = setup_billable_work(client, alice)
        invoice = client.post(
            f"{API}/invoices",
            json={"client_id": acme["id"], "total_amount": "100", "time_entry_ids": [entry["id"]]},
            headers=alice,
        ).json()

        assert client.delete(f"{API}/invoices/{invoice['id']}", headers=alice).status_code == 204
        assert client.get(f"{API}/time-entries/{entry['id']}", headers=alice).status_code == 200
        assert client.delete(f"{API}/time-entries/{entry['id']}", headers=alice).status_code == 204


class TestDashboardFlow:

    def test_work_to_revenue(self, client, alice):
        acme, _, entry = setup_billable_work(client, alice)

        dashboard = client.get(f"{API}/dashboard", headers=alice).json()
        assert Decimal(dashboard["unbilled_hours"]) == Decimal("2")
        assert Decimal(dashboard["total_revenue"]) == Decimal("0")
        assert dashboard["recent_time_entries"][0]["client_name"] == "Acme"

        preview = client.post(
            f"{API}/invoices/generate-from-time-entries",
            json={"client_id": acme["id"], "start_date": "2026-01-01", "end_date": "2026-01-31"},
            headers=alice,
        ).json()
        assert Decimal(preview["total_amount"]) == Decimal("100")
        assert preview["time_entry_ids"] == [entry["id"]]

        invoice = client.post(
            f"{API}/invoices",
            json={
                "client_id": acme["id"],
                "total_amount": preview["total_amount"],
                "time_entry_ids": preview["time_entry_ids"],
            },
            headers=alice,
        ).json()
        pending = client.get(f"{API}/dashboard", headers=alice).json()
        assert Decimal(pending["pending_revenue"]) == Decimal("100")
        assert pending["unpaid_invoices"] == 1

        paid = client.post(f"{API}/invoices/{invoice['id']}/toggle-paid", headers=alice).json()
        assert paid["is_paid"] is True
        assert paid["payment_date"] is not None

        client.post(f"{API}/time-entries/{entry['id']}/toggle-billed", headers=alice)
        settled = client.get(f"{API}/dashboard", headers=alice).json()
        assert Decimal(settled["total_revenue"]) == Decimal("100")
        assert Decimal(settled["pending_revenue"]) == Decimal("0")
        assert Decimal(settled["unbilled_hours"]) == Decimal("0")
        assert settled["active_clients"] == 1

    def test_dashboard_is_scoped_to_user(self, client, alice, bob):
        setup_billable_work(client, alice)

        dashboard = client.get(f"{API}/dashboard", headers=bob).json()

        assert dashboard["active_clients"] == 0
        assert Decimal(dashboard["unbilled_hours"]) == Decimal("0")
        assert dashboard["recent_time_entries"] == []


class TestUserProfileApi:

    def test_profile_is_provisioned_and_editable(self, client, alice):
        profile = client.get(f"{API}/users/me", headers=alice)
        assert profile.status_code == 200
        assert profile.json()["id"] == "user-alice"

        updated = client.put(
            f"{API}/users/me",
            json={"first_name": "Alice", "last_name": "Smith", "company_name": "Smith Studio"},
            headers=alice,
        )

        assert updated.status_code == 200
        assert updated.json()["full_name"] == "Alice Smith"
        assert client.get(f"{API}/users/me", headers=alice).json()["company_name"] == "Smith Studio"


class TestForeignRecordsById:

    def test_other_users_records_cannot_be_changed(self, client, alice, bob):
        acme, website, entry = setup_billable_work(client, alice)
        invoice = client.post(
            f"{API}/invoices", json={"client_id": acme["id"], "total_amount": "10"}, headers=alice
        ).json()

        attempts = [
            client.post(f"{API}/time-entries/{entry['id']}/toggle-billed", headers=bob),
            client.delete(f"{API}/time-entries/{entry['id']}", headers=bob),
            client.post(f"{API}/invoices/{invoice['id']}/toggle-paid", headers=bob),
            client.delete(f"{API}/invoices/{invoice['id']}", headers=bob),
            client.delete(f"{API}/projects/{website['id']}", headers=bob),
            client.get(f"{API}/projects/{website['id']}", headers=bob),
        ]

        assert [response.status_code for response in attempts] == [404] * len(attempts)
        assert client.get(f"{API}/time-entries/{entry['id']}", headers=alice).json()["is_billed"] is False
        assert client.get(f"{API}/invoices/{invoice['id']}", headers=alice).json()["is_paid"] is False
        assert client.get(f"{API}/projects/{website['id']}", headers=alice).status_code == 200
