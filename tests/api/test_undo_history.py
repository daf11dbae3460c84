"""
Tests for the undo history API.

These drive the whole loop over HTTP: a mutation through an
entity endpoint, the history listing, and the revert.
"""


IDENTITY = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "country": "US",
    "status": "Active",
}


def create_identity(client, user="user-1", **overrides):
    response = client.post(
        "/identities",
        json={**IDENTITY, **overrides},
        headers={"X-User-Id": user},
    )
    assert response.status_code == 201
    return response.json()


class TestHistoryListing:

    def test_empty_history(self, client):
        response = client.get("/undo-history")
        assert response.status_code == 200
        assert response.json() == []

    def test_create_is_recorded(self, client):
        identity = create_identity(client)

        history = client.get("/undo-history").json()
        assert len(history) == 1
        entry = history[0]
        assert entry["action"] == "create"
        assert entry["entity_type"] == "identity"
        assert entry["entity_id"] == identity["id"]
        assert entry["entity_name"] == "Jane Doe"
        assert entry["user_id"] == "user-1"
        assert entry["new_data"]["email"] == "jane@example.com"
        assert entry["previous_data"] is None
        assert entry["reverted_at"] is None

    def test_missing_user_header_records_empty_user(self, client):
        client.post("/identities", json=IDENTITY)
        assert client.get("/undo-history").json()[0]["user_id"] == ""

    def test_update_and_delete_recorded_newest_first(self, client):
        identity = create_identity(client)
        client.patch(f"/identities/{identity['id']}", json={"status": "Burned"})
        client.delete(f"/identities/{identity['id']}")

        actions = [e["action"] for e in client.get("/undo-history").json()]
        assert actions == ["delete", "update", "create"]

    def test_update_records_both_snapshots(self, client):
        identity = create_identity(client)
        client.patch(f"/identities/{identity['id']}", json={"status": "Burned"})

        entry = client.get("/undo-history").json()[0]
        assert entry["previous_data"]["status"] == "Active"
        assert entry["new_data"]["status"] == "Burned"

    def test_failed_mutation_is_not_recorded(self, client):
        response = client.post("/cards", json={
            "identity_id": "ghost",
            "card_type": "Debit",
            "last_four": "1111",
            "expiry_month": 1,
            "expiry_year": 2030,
            "card_holder": "Nobody",
        })
        assert response.status_code == 400
        assert client.get("/undo-history").json() == []

    def test_clear_history(self, client):
        create_identity(client)
        response = client.delete("/undo-history")
        assert response.status_code == 204
        assert client.get("/undo-history").json() == []


class TestRevert:

    def test_revert_delete_restores_identity(self, client):
        identity = create_identity(client)
        client.delete(f"/identities/{identity['id']}")
        assert client.get(f"/identities/{identity['id']}").status_code == 404

        entry = client.get("/undo-history").json()[0]
        response = client.post(f"/undo-history/{entry['id']}/revert")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "reverted"
        assert body["record"]["action"] == "delete"

        restored = client.get(f"/identities/{identity['id']}")
        assert restored.status_code == 200
        assert restored.json()["name"] == "Jane Doe"
        assert restored.json()["created_at"] == identity["created_at"]

        # Only the create is left to undo
        remaining = client.get("/undo-history").json()
        assert [e["action"] for e in remaining] == ["create"]

    def test_revert_update_restores_previous_values(self, client):
        identity = create_identity(client, notes="original")
        client.patch(
            f"/identities/{identity['id']}",
            json={"notes": "changed", "status": "Pending Docs"},
        )
        entry = client.get("/undo-history").json()[0]

        client.post(f"/undo-history/{entry['id']}/revert")

        data = client.get(f"/identities/{identity['id']}").json()
        assert data["notes"] == "original"
        assert data["status"] == "Active"

    def test_revert_create_removes_entity(self, client):
        identity = create_identity(client)
        entry = client.get("/undo-history").json()[0]

        client.post(f"/undo-history/{entry['id']}/revert")

        assert client.get(f"/identities/{identity['id']}").status_code == 404

    def test_revert_twice_returns_404(self, client):
        create_identity(client)
        entry = client.get("/undo-history").json()[0]

        first = client.post(f"/undo-history/{entry['id']}/revert")
        second = client.post(f"/undo-history/{entry['id']}/revert")

        assert first.status_code == 200
        assert second.status_code == 404
        assert second.json()["detail"] == "Failed to revert action"

    def test_revert_unknown_id_returns_404(self, client):
        create_identity(client)

        response = client.post("/undo-history/does-not-exist/revert")

        assert response.status_code == 404
        assert len(client.get("/undo-history").json()) == 1

    def test_apply_failure_returns_409_and_stays_reverted(
        self, client, action_log
    ):
        identity = create_identity(client)
        card = client.post("/cards", json={
            "identity_id": identity["id"],
            "card_type": "Credit",
            "last_four": "4242",
            "expiry_month": 4,
            "expiry_year": 2030,
            "card_holder": "Jane Doe",
        }).json()
        client.delete(f"/cards/{card['id']}")
        card_delete = client.get("/undo-history").json()[0]
        assert card_delete["entity_name"] == "****4242"
        client.delete(f"/identities/{identity['id']}")

        response = client.post(f"/undo-history/{card_delete['id']}/revert")

        assert response.status_code == 409
        assert "Identity" in response.json()["detail"]
        assert client.get(f"/cards/{card['id']}").status_code == 404
        assert action_log.get(card_delete["id"]).reverted_at is not None
        ids = [e["id"] for e in client.get("/undo-history").json()]
        assert card_delete["id"] not in ids

    def test_revert_order_create(self, client, platform):
        order = client.post("/orders", json={
            "platform_id": platform.id,
            "order_number": "X1",
            "amount": "25.00",
            "order_date": "2026-10-01T12:00:00",
        }).json()
        entry = client.get("/undo-history").json()[0]
        assert entry["entity_type"] == "order"
        assert entry["entity_name"] == "X1"

        response = client.post(f"/undo-history/{entry['id']}/revert")

        assert response.status_code == 200
        assert client.get(f"/orders/{order['id']}").status_code == 404
