import json
import stripe

from tests.stripe_factories import charge, checkout_session, page, payment_link

AUTH = {"Authorization": "Bearer sk_test_x"}


def test_missing_authorization_header(client):
    r = client.get("/")
    assert r.status_code == 401
    body = r.json()
    assert body["error"] == "Missing or invalid Authorization header"
    assert "Bearer" in body["message"]


def test_wrong_key_format(client):
    r = client.get("/", headers={"Authorization": "Bearer abc123"})
    assert r.status_code == 401
    body = r.json()
    assert body["error"] == "Invalid Stripe secret key format"
    assert "sk_" in body["message"]


def test_one_link_without_sessions(client, fake_stripe):
    links, sessions = fake_stripe([page([payment_link("plink_1")])])
    r = client.get("/", headers=AUTH)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    body = r.json()
    assert body["total_active_payment_links"] == 1
    assert body["total_successful_transactions"] == 0
    assert body["total_revenue_cents"] == 0
    assert body["payment_links"][0]["transactions"] == []
    assert links.calls[0]["api_key"] == "sk_test_x"
    assert sessions.calls[0]["payment_link"] == "plink_1"


def test_summary_is_pretty_printed(client, fake_stripe):
    fake_stripe([page([])])
    r = client.get("/", headers=AUTH)
    assert r.status_code == 200
    assert r.text == json.dumps({
        "total_active_payment_links": 0,
        "total_successful_transactions": 0,
        "total_revenue_cents": 0,
        "payment_links": [],
    }, indent=2)


def test_end_to_end_two_pages_and_two_charges(client, fake_stripe):
    links, sessions = fake_stripe(
        [
            page([payment_link("plink_1")], has_more=True),
            page([payment_link("plink_2")], has_more=False),
        ],
        {
            "plink_2": [page([
                checkout_session("cs_1", link_id="plink_2", charges=[charge("ch_1", 500), charge("ch_2", 700)]),
            ])],
        },
    )
    r = client.get("/", headers=AUTH)
    assert r.status_code == 200
    body = r.json()

    # Pagination par curseur sur les payment links
    assert [c.get("starting_after") for c in links.calls] == [None, "plink_1"]
    # Une collecte de sessions par lien, dans l'ordre
    assert [c["payment_link"] for c in sessions.calls] == ["plink_1", "plink_2"]

    assert body["total_active_payment_links"] == 2
    assert body["total_successful_transactions"] == 2
    assert body["total_revenue_cents"] == 1200
    link_2 = body["payment_links"][1]
    assert link_2["id"] == "plink_2"
    assert [t["amount"] for t in link_2["transactions"]] == [500, 700]
    assert link_2["transactions"][0] == {
        "payment_intent_id": "pi_1",
        "charge_id": "ch_1",
        "amount": 500,
        "currency": "usd",
        "created": 1700000000,
        "customer_email": "buyer@example.com",
        "receipt_url": "https://pay.stripe.com/receipts/rcpt_1",
    }
    assert link_2["line_items"][0] == {
        "id": "li_1",
        "description": "T-shirt",
        "price_id": "price_1",
        "product_name": "T-shirt",
        "quantity": 1,
        "amount_total": 2000,
    }


def test_upstream_error_on_second_call_returns_500(client, fake_stripe):
    err = stripe.InvalidRequestError(
        "Invalid starting_after", param="starting_after",
        http_body='{"error": {"message": "Invalid starting_after"}}', http_status=400,
    )
    fake_stripe([page([payment_link("plink_1")], has_more=True), err])
    r = client.get("/", headers=AUTH)
    assert r.status_code == 500
    body = r.json()
    assert body["error"] == "Failed to process payment links"
    assert "400" in body["message"]
    # Pas de résultat partiel
    assert "payment_links" not in body


def test_network_failure_returns_500(client, fake_stripe):
    fake_stripe([stripe.APIConnectionError("Connection reset by peer")])
    r = client.get("/", headers=AUTH)
    assert r.status_code == 500
    assert r.json()["error"] == "Failed to process payment links"
    assert "Connection reset by peer" in r.json()["message"]


def test_malformed_upstream_payload_returns_500(client, fake_stripe):
    fake_stripe([{"object": "list"}])
    r = client.get("/", headers=AUTH)
    assert r.status_code == 500
    assert "Unexpected Stripe list payload" in r.json()["message"]


def test_any_path_and_method_reach_the_report(client, fake_stripe):
    fake_stripe([page([]), page([])])
    assert client.get("/some/path", headers=AUTH).status_code == 200
    assert client.post("/", headers=AUTH).status_code == 200


def test_request_id_is_echoed(client, fake_stripe):
    fake_stripe([page([])])
    r = client.get("/", headers={**AUTH, "X-Request-ID": "req-abc"})
    assert r.headers["x-request-id"] == "req-abc"
    r2 = client.get("/")
    assert r2.headers.get("x-request-id")
