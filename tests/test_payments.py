def test_checkout_returns_hosted_url(client, payments):
    r = client.post("/create-checkout-session", json={"email": "ada@sapiens.io", "userId": "u1"})
    assert r.status_code == 200
    url = r.json()["url"]
    assert url.startswith("https://checkout.stripe.com/")

    (session,) = payments.sessions.values()
    assert session.metadata == {"userId": "u1"}


def test_checkout_failure_surfaces_processor_message(client, payments):
    payments.fail_with = "Invalid API Key provided: sk_test_***"
    r = client.post("/create-checkout-session", json={"email": "ada@sapiens.io", "userId": "u1"})
    assert r.status_code == 500
    assert r.json() == {"error": "Invalid API Key provided: sk_test_***"}


def test_confirm_payment_upgrades_once(client, register, payments):
    user = register("ada@sapiens.io")
    payments.add_session("cs_paid", user["id"])

    first = client.patch("/payment-success", json={"session_id": "cs_paid"})
    assert first.json() == {"success": True}
    assert client.get("/users/ada@sapiens.io/premium").json() == {"isPremium": True}

    second = client.patch("/payment-success", json={"session_id": "cs_paid"})
    assert second.json() == {"success": False}


def test_confirm_payment_for_premium_user_changes_nothing(client, register, payments, store):
    user = register("ada@sapiens.io")
    store.collection("users").document(user["id"]).update({"isPremium": True})
    before = client.get(f"/users/{user['id']}").json()
    payments.add_session("cs_again", user["id"])

    r = client.patch("/payment-success", json={"session_id": "cs_again"})
    assert r.json() == {"success": False}
    assert client.get(f"/users/{user['id']}").json() == before


def test_confirm_payment_for_unknown_user(client, payments):
    payments.add_session("cs_orphan", "no-such-user")
    assert client.patch("/payment-success", json={"session_id": "cs_orphan"}).json() == {"success": False}


def test_confirm_payment_without_user_metadata(client, payments):
    payments.add_session("cs_blank", None)
    assert client.patch("/payment-success", json={"session_id": "cs_blank"}).json() == {"success": False}


def test_full_checkout_round_trip(client, register, payments):
    user = register("ada@sapiens.io")
    client.post("/create-checkout-session", json={"email": "ada@sapiens.io", "userId": user["id"]})
    (session_id,) = payments.sessions

    assert client.patch("/payment-success", json={"session_id": session_id}).json() == {"success": True}
    assert client.get(f"/users/{user['id']}").json()["isPremium"] is True
