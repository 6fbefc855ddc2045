"""Store routes — one store per user, owner and products expanded on read."""

from app.db.models import Store


def test_create_store_returns_201(client, make_user):
    user = make_user()

    res = client.post("/stores", json={"name": "Bakery", "userId": user["id"]})

    assert res.status_code == 201
    body = res.json()
    assert isinstance(body["id"], int)
    assert body["name"] == "Bakery"
    assert body["userId"] == user["id"]


def test_create_store_accepts_numeric_string_user_id(client, make_user):
    user = make_user()

    res = client.post("/stores", json={"name": "Bakery", "userId": str(user["id"])})

    assert res.status_code == 201
    assert res.json()["userId"] == user["id"]


def test_second_store_for_same_user_returns_400(client, make_store, test_db):
    store = make_store()

    res = client.post("/stores", json={"name": "Second", "userId": store["userId"]})

    assert res.status_code == 400
    assert res.json() == {"error": "user already has a store"}
    assert test_db.query(Store).filter(Store.user_id == store["userId"]).count() == 1


def test_create_store_for_missing_user_returns_400(client):
    res = client.post("/stores", json={"name": "Orphan", "userId": 9999})

    assert res.status_code == 400
    assert res.json()["error"]


def test_get_store_expands_owner_and_products(client, make_user, make_store, make_product):
    owner = make_user(name="Owner")
    store = make_store(user_id=owner["id"])
    first = make_product(store_id=store["id"], name="A")
    second = make_product(store_id=store["id"], name="B", price="2.50")

    res = client.get(f"/stores/{store['id']}")

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == store["id"]
    assert body["user"] == owner
    assert [p["id"] for p in body["products"]] == [first["id"], second["id"]]
    assert body["products"][1]["price"] == "2.50"


def test_get_store_without_products(client, make_store):
    store = make_store()

    res = client.get(f"/stores/{store['id']}")

    assert res.status_code == 200
    assert res.json()["products"] == []


def test_get_missing_store_returns_404(client):
    res = client.get("/stores/9999")

    assert res.status_code == 404
    assert res.json() == {"error": "store not found"}


def test_get_store_with_non_numeric_id_returns_400(client):
    assert client.get("/stores/not-a-number").status_code == 400


def test_update_store_name(client, make_store):
    store = make_store(name="Old")

    res = client.put(f"/stores/{store['id']}", json={"name": "New"})

    assert res.status_code == 200
    assert res.json() == {"id": store["id"], "name": "New", "userId": store["userId"]}


def test_update_store_with_empty_name_keeps_name(client, make_store):
    store = make_store(name="Kept")

    res = client.put(f"/stores/{store['id']}", json={"name": "", "userId": 0})

    assert res.status_code == 200
    assert res.json()["name"] == "Kept"
    assert res.json()["userId"] == store["userId"]


def test_update_store_owner(client, make_user, make_store):
    store = make_store()
    new_owner = make_user()

    res = client.put(f"/stores/{store['id']}", json={"userId": new_owner["id"]})

    assert res.status_code == 200
    assert res.json()["userId"] == new_owner["id"]


def test_update_store_to_owner_with_a_store_returns_400(client, make_store):
    first = make_store()
    second = make_store()

    res = client.put(f"/stores/{second['id']}", json={"userId": first["userId"]})

    assert res.status_code == 400


def test_update_missing_store_returns_400(client):
    res = client.put("/stores/9999", json={"name": "Nope"})

    assert res.status_code == 400
    assert res.json() == {"error": "store not found"}


def test_delete_store(client, make_store):
    store = make_store()

    res = client.delete(f"/stores/{store['id']}")

    assert res.status_code == 204
    assert client.get(f"/stores/{store['id']}").status_code == 404


def test_delete_missing_store_returns_400(client):
    res = client.delete("/stores/9999")

    assert res.status_code == 400
    assert res.json() == {"error": "store not found"}


def test_delete_store_with_products_returns_400(client, make_product):
    product = make_product()

    res = client.delete(f"/stores/{product['storeId']}")

    assert res.status_code == 400
    assert client.get(f"/stores/{product['storeId']}").status_code == 200


def test_store_id_too_large_for_database_returns_400(client):
    huge_id = 99999999999999999999

    assert client.get(f"/stores/{huge_id}").status_code == 400
    assert client.put(f"/stores/{huge_id}", json={"name": "X"}).status_code == 400
    assert client.delete(f"/stores/{huge_id}").status_code == 400


def test_create_store_with_user_id_too_large_returns_400(client):
    res = client.post("/stores", json={"name": "Huge", "userId": 99999999999999999999})

    assert res.status_code == 400
    assert res.json()["error"]
