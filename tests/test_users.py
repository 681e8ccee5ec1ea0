import threading

from app.crud.user import UserCRUD
from app.models.user import user_id_for_email
from app.utils.exceptions import UserAlreadyExistsError


def test_signup_assigns_server_defaults(client):
    r = client.post(
        "/users",
        json={"email": "ada@sapiens.io", "name": "Ada", "role": "admin", "isPremium": True},
    )
    assert r.status_code == 200
    user = r.json()
    assert user["email"] == "ada@sapiens.io"
    assert user["name"] == "Ada"
    assert user["role"] == "user"
    assert user["isPremium"] is False
    assert user["savedLessons"] == []
    assert user["createdAt"]
    assert user["id"] == user_id_for_email("ada@sapiens.io")


def test_duplicate_signup_is_rejected(client, register):
    register("ada@sapiens.io")

    r = client.post("/users", json={"email": "ada@sapiens.io", "name": "Impostor"})
    assert r.status_code == 400
    assert r.json() == {"message": "user already exists"}

    users = client.get("/users").json()
    assert len(users) == 1
    assert "name" not in users[0]


def test_signup_requires_email(client):
    assert client.post("/users", json={"name": "nobody"}).status_code == 422


def test_lookup_by_id_and_email(client, register):
    created = register("grace@sapiens.io", name="Grace")

    by_id = client.get(f"/users/{created['id']}").json()
    by_email = client.get("/users/email/grace@sapiens.io").json()
    assert by_id["name"] == by_email["name"] == "Grace"


def test_lookup_of_unknown_user_returns_null(client):
    assert client.get("/users/doesnotexist").json() is None
    assert client.get("/users/email/ghost@sapiens.io").json() is None


def test_list_users(client, register):
    register("a@sapiens.io")
    register("b@sapiens.io")
    emails = sorted(u["email"] for u in client.get("/users").json())
    assert emails == ["a@sapiens.io", "b@sapiens.io"]


def test_premium_and_role_checks(client, register, store):
    created = register("ada@sapiens.io")
    assert client.get("/users/ada@sapiens.io/premium").json() == {"isPremium": False}
    assert client.get("/users/ada@sapiens.io/role").json() == {"role": "user"}

    store.collection("users").document(created["id"]).update({"isPremium": True, "role": "admin"})
    assert client.get("/users/ada@sapiens.io/premium").json() == {"isPremium": True}
    assert client.get("/users/ada@sapiens.io/role").json() == {"role": "admin"}


def test_premium_and_role_defaults_for_unknown_user(client):
    assert client.get("/users/ghost@sapiens.io/premium").json() == {"isPremium": False}
    assert client.get("/users/ghost@sapiens.io/role").json() == {"role": "user"}


def test_email_lookup_ignores_case(client, register):
    register("Ada@Sapiens.io", name="Ada")

    user = client.get("/users/email/ada@sapiens.io").json()
    assert user["name"] == "Ada"
    assert user["email"] == "ada@sapiens.io"
    assert client.get("/users/email/ADA@SAPIENS.IO").json()["name"] == "Ada"

    r = client.post("/users", json={"email": "ada@sapiens.io"})
    assert r.status_code == 400


def test_concurrent_signups_store_one_user(store):
    users = UserCRUD(store)
    barrier = threading.Barrier(2)
    outcomes = []

    def signup():
        barrier.wait()
        try:
            users.create_user({"email": "race@sapiens.io"})
            outcomes.append("created")
        except UserAlreadyExistsError:
            outcomes.append("rejected")

    threads = [threading.Thread(target=signup) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["created", "rejected"]
    assert len(store.collection("users").get()) == 1
