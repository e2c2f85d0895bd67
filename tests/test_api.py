"""HTTP tests. Each test gets its own app around a fresh in-memory store."""

import pytest
from fastapi.testclient import TestClient

from api.main import INTERNAL_ERROR_MESSAGE, STATUS_BY_KIND, create_app
from contactbook.domain import ErrorKind
from contactbook.infrastructure import InMemoryContactRepository

from conftest import ALICE, BOB, CAROL


@pytest.fixture
def app():
    return create_app(InMemoryContactRepository())


@pytest.fixture
def client(app):
    return TestClient(app, follow_redirects=False)


def _create(client, body) -> int:
    r = client.post("/contacts", json=body)
    assert r.status_code == 303, r.text
    return int(r.headers["location"].rsplit("/", 1)[1])


def _contact(n: int) -> dict:
    return {
        "fname": f"Name{n:02d}",
        "lname": "Test",
        "email": f"user{n}@example.com",
        "birthday": "1980-01-01",
    }


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_every_error_kind_has_a_status():
    assert set(STATUS_BY_KIND) == set(ErrorKind)


def test_post_redirects_to_new_contact(client):
    r = client.post("/contacts", json=ALICE)
    assert r.status_code == 303
    assert r.headers["location"] == "/contacts/1"

    got = client.get("/contacts/1")
    assert got.status_code == 200
    assert got.json() == {"id": 1, **ALICE}


def test_post_missing_field_is_400(client):
    body = {k: v for k, v in ALICE.items() if k != "email"}
    r = client.post("/contacts", json=body)
    assert r.status_code == 400
    assert "email" in r.json()["message"]


def test_post_malformed_json_is_400(client):
    r = client.post(
        "/contacts", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert r.status_code == 400
    assert r.json() == {"message": "Request body must be valid JSON"}


def test_post_duplicate_email_is_400(client):
    _create(client, ALICE)
    r = client.post("/contacts", json={**BOB, "email": ALICE["email"]})
    assert r.status_code == 400
    assert "already exists" in r.json()["message"]
    assert len(client.get("/contacts").json()) == 1


def test_get_unknown_id_is_404(client):
    r = client.get("/contacts/42")
    assert r.status_code == 404
    assert r.json() == {"message": "Contact not found"}


def test_get_malformed_id_is_404(client):
    _create(client, ALICE)
    assert client.get("/contacts/abc").status_code == 404
    assert client.get("/contacts/1.5").status_code == 404
    assert client.get("/contacts/-1").status_code == 404


def test_over_long_numeric_id_is_404(client):
    _create(client, ALICE)
    huge = "1" * 5000
    r = client.get(f"/contacts/{huge}")
    assert r.status_code == 404
    assert r.json() == {"message": "Contact not found"}
    assert client.delete(f"/contacts/{huge}").status_code == 404
    assert client.put(f"/contacts/{huge}", json={"lname": "X"}).status_code == 404
    assert len(client.get("/contacts").json()) == 1


def test_put_merges_supplied_fields(client):
    cid = _create(client, ALICE)
    r = client.put(f"/contacts/{cid}", json={"lname": "Carter"})
    assert r.status_code == 303
    assert r.headers["location"] == f"/contacts/{cid}"
    assert client.get(f"/contacts/{cid}").json() == {"id": cid, **ALICE, "lname": "Carter"}


def test_put_ignores_id_in_body(client):
    cid = _create(client, ALICE)
    r = client.put(f"/contacts/{cid}", json={"id": 99, "fname": "Alicia"})
    assert r.status_code == 303
    assert client.get(f"/contacts/{cid}").json()["fname"] == "Alicia"
    assert client.get("/contacts/99").status_code == 404


def test_put_invalid_body_is_400(client):
    cid = _create(client, ALICE)
    r = client.put(f"/contacts/{cid}", json={"birthday": "not a date"})
    assert r.status_code == 400
    assert client.get(f"/contacts/{cid}").json()["birthday"] == ALICE["birthday"]


def test_put_unknown_id_is_404(client):
    r = client.put("/contacts/7", json={"lname": "Nobody"})
    assert r.status_code == 404


def test_delete_then_get_is_404(client):
    cid = _create(client, ALICE)
    r = client.delete(f"/contacts/{cid}")
    assert r.status_code == 303
    assert r.headers["location"] == "/contacts"
    assert client.get(f"/contacts/{cid}").status_code == 404


def test_delete_unknown_id_leaves_store_unchanged(client):
    _create(client, ALICE)
    _create(client, BOB)
    r = client.delete("/contacts/9")
    assert r.status_code == 404
    assert [c["fname"] for c in client.get("/contacts").json()] == ["Alice", "Bob"]


def test_list_defaults_to_fname_ascending(client):
    for body in (CAROL, ALICE, BOB):
        _create(client, body)
    r = client.get("/contacts")
    assert r.status_code == 200
    assert [c["fname"] for c in r.json()] == ["Alice", "Bob", "Carol"]
    assert r.headers["x-page-total"] == "1"
    assert r.headers["x-page-next"] == ""
    assert r.headers["x-page-prev"] == ""


@pytest.mark.parametrize(
    "field,direction,expected",
    [
        ("lname", "asc", ["Carol", "Bob", "Alice"]),
        ("lname", "desc", ["Alice", "Bob", "Carol"]),
        ("birthday", "asc", ["Bob", "Alice", "Carol"]),
        ("email", "desc", ["Carol", "Bob", "Alice"]),
    ],
)
def test_list_sorting(client, field, direction, expected):
    for body in (ALICE, BOB, CAROL):
        _create(client, body)
    r = client.get("/contacts", params={"sort": field, "direction": direction})
    assert r.status_code == 200
    assert [c["fname"] for c in r.json()] == expected


def test_list_invalid_sort_field_is_400(client):
    r = client.get("/contacts", params={"sort": "age"})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid sort field"}


def test_list_invalid_direction_is_400(client):
    r = client.get("/contacts", params={"direction": "up"})
    assert r.status_code == 400
    assert r.json() == {"message": "Invalid sort direction"}


def test_list_size_limit(client):
    _create(client, ALICE)
    assert client.get("/contacts", params={"size": 21}).status_code == 400
    assert client.get("/contacts", params={"size": 20}).status_code == 200


def test_list_page_out_of_range_is_416(client):
    for body in (ALICE, BOB, CAROL):
        _create(client, body)
    r = client.get("/contacts", params={"page": 9999})
    assert r.status_code == 416
    assert "out of range" in r.json()["message"]


def test_list_pagination_headers_and_pages(client):
    for n in range(25):
        _create(client, _contact(n))

    first = client.get("/contacts", params={"size": 10})
    assert [c["fname"] for c in first.json()] == [f"Name{n:02d}" for n in range(10)]
    assert first.headers["x-page-total"] == "3"
    assert first.headers["x-page-next"] == "2"
    assert first.headers["x-page-prev"] == ""

    last = client.get("/contacts", params={"size": 10, "page": 3})
    assert [c["fname"] for c in last.json()] == [f"Name{n:02d}" for n in range(20, 25)]
    assert last.headers["x-page-next"] == ""
    assert last.headers["x-page-prev"] == "2"


def test_list_non_numeric_page_and_size_use_defaults(client):
    for n in range(12):
        _create(client, _contact(n))
    r = client.get("/contacts", params={"page": "x", "size": "y"})
    assert r.status_code == 200
    assert len(r.json()) == 10


@pytest.mark.parametrize("size", ["1_1", "+11", " 11", "-3", "11.0"])
def test_list_size_accepts_plain_digits_only(client, size):
    for n in range(12):
        _create(client, _contact(n))
    r = client.get("/contacts", params={"size": size})
    assert r.status_code == 200
    assert len(r.json()) == 10


def test_list_over_long_page_uses_default(client):
    _create(client, ALICE)
    r = client.get("/contacts", params={"page": "9" * 5000})
    assert r.status_code == 200
    assert len(r.json()) == 1


def test_list_filter_applies_only_with_all_three_headers(client):
    for body in (ALICE, BOB, CAROL):
        _create(client, body)
    filtered = client.get(
        "/contacts",
        headers={"X-Filter-By": "lname", "X-Filter-Operator": "eq", "X-Filter-Value": "jones"},
    )
    assert [c["fname"] for c in filtered.json()] == ["Bob"]

    partial = client.get(
        "/contacts", headers={"X-Filter-By": "lname", "X-Filter-Operator": "eq"}
    )
    assert len(partial.json()) == 3


def test_list_filter_by_birthday(client):
    for body in (ALICE, BOB, CAROL):
        _create(client, body)
    r = client.get(
        "/contacts",
        params={"sort": "birthday"},
        headers={
            "X-Filter-By": "birthday",
            "X-Filter-Operator": "gte",
            "X-Filter-Value": "1990-01-01",
        },
    )
    assert [c["fname"] for c in r.json()] == ["Alice", "Carol"]


def test_list_unknown_filter_operator_is_400(client):
    _create(client, ALICE)
    r = client.get(
        "/contacts",
        headers={"X-Filter-By": "fname", "X-Filter-Operator": "like", "X-Filter-Value": "A"},
    )
    assert r.status_code == 400


def test_unexpected_failure_is_opaque_500(app, client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("database password is hunter2")

    monkeypatch.setattr(app.state.service, "get_contact", boom)
    r = client.get("/contacts/1")
    assert r.status_code == 500
    assert r.json() == {"message": INTERNAL_ERROR_MESSAGE}
    assert "hunter2" not in r.text


def test_create_app_loads_seed_file(tmp_path, monkeypatch):
    seed = tmp_path / "contacts.json"
    seed.write_text('[{"id": 5, "fname": "Seed", "lname": "Row", "email": "s@example.com", "birthday": "2000-02-29"}]')
    monkeypatch.setenv("CONTACTS_SEED_FILE", str(seed))
    client = TestClient(create_app(), follow_redirects=False)

    assert client.get("/contacts/5").json()["fname"] == "Seed"
    assert client.post("/contacts", json=ALICE).headers["location"] == "/contacts/6"
