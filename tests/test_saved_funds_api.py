"""
Tests for the /api/saved-funds endpoints.

Every route sits behind the bearer-token gate and only ever touches the
caller's own watchlist.
"""

FUND = {"fundId": "119551", "fundName": "Alpha Growth Fund", "fundCategory": "Equity"}


class TestSaveAndList:
    def test_walkthrough(self, client, auth_headers):
        saved = client.post("/api/saved-funds", json=FUND, headers=auth_headers)
        assert saved.status_code == 200
        body = saved.json()
        assert body["fundId"] == "119551"
        assert body["fundName"] == "Alpha Growth Fund"
        assert body["fundCategory"] == "Equity"
        assert body["nav"] is None
        assert body["userId"] == 1
        assert "savedAt" in body

        listed = client.get("/api/saved-funds", headers=auth_headers).json()
        assert [f["fundId"] for f in listed] == ["119551"]

        removed = client.delete("/api/saved-funds/119551", headers=auth_headers)
        assert removed.status_code == 200
        assert removed.json() == {"message": "Fund removed from saved list"}
        assert client.get("/api/saved-funds", headers=auth_headers).json() == []

        again = client.delete("/api/saved-funds/119551", headers=auth_headers)
        assert again.status_code == 404
        assert again.json() == {"message": "Saved fund not found"}

    def test_save_twice_rejected(self, client, auth_headers, saved_fund_store):
        assert client.post("/api/saved-funds", json=FUND, headers=auth_headers).status_code == 200
        response = client.post("/api/saved-funds", json=FUND, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Fund is already saved"}
        assert len(client.get("/api/saved-funds", headers=auth_headers).json()) == 1
        assert len(saved_fund_store) == 1

    def test_optional_fields(self, client, auth_headers):
        response = client.post(
            "/api/saved-funds",
            json={"fundId": 120503, "fundName": "Beta Debt Fund", "fundCategory": "", "nav": 45.12},
            headers=auth_headers,
        )
        assert response.status_code == 200
        body = response.json()
        assert body["fundId"] == "120503"
        assert body["fundCategory"] is None
        assert body["nav"] == "45.12"

    def test_missing_fund_name(self, client, auth_headers):
        response = client.post("/api/saved-funds", json={"fundId": "1"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Field required"}

    def test_blank_fund_id(self, client, auth_headers):
        response = client.post("/api/saved-funds", json={"fundId": "  ", "fundName": "X"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"message": "Fund ID is required"}


class TestCheck:
    def test_check_follows_save_and_remove(self, client, auth_headers):
        url = "/api/saved-funds/119551/check"
        assert client.get(url, headers=auth_headers).json() == {"isSaved": False}
        client.post("/api/saved-funds", json=FUND, headers=auth_headers)
        assert client.get(url, headers=auth_headers).json() == {"isSaved": True}
        client.delete("/api/saved-funds/119551", headers=auth_headers)
        assert client.get(url, headers=auth_headers).json() == {"isSaved": False}


class TestOwnership:
    def test_watchlists_are_per_user(self, client, register):
        alice = {"Authorization": f"Bearer {register(email='a@x.com')['token']}"}
        bob = {"Authorization": f"Bearer {register(email='b@x.com', name='Bob')['token']}"}

        client.post("/api/saved-funds", json=FUND, headers=alice)
        # Bob may save the same fund independently
        assert client.post("/api/saved-funds", json=FUND, headers=bob).status_code == 200

        assert client.delete("/api/saved-funds/119551", headers=bob).status_code == 200
        assert client.get("/api/saved-funds/119551/check", headers=alice).json() == {"isSaved": True}
        assert client.get("/api/saved-funds/119551/check", headers=bob).json() == {"isSaved": False}


class TestGate:
    def test_routes_require_token(self, client):
        assert client.get("/api/saved-funds").status_code == 401
        assert client.post("/api/saved-funds", json=FUND).status_code == 401
        assert client.delete("/api/saved-funds/119551").status_code == 401
        assert client.get("/api/saved-funds/119551/check").status_code == 401

    def test_invalid_token_forbidden(self, client):
        headers = {"Authorization": "Bearer nope"}
        response = client.get("/api/saved-funds", headers=headers)
        assert response.status_code == 403
        assert response.json() == {"message": "Invalid or expired token"}
