MOVIES = "/api/v1/movies"
CATEGORIES = "/api/v1/categories"


def _die_hard(category_id, **overrides):
    payload = {
        "title": "Die Hard",
        "description": "John McClane against Hans Gruber",
        "category_id": category_id,
        "release_date": "1988-07-15",
    }
    payload.update(overrides)
    return payload


def test_scenario(client):
    resp = client.post(CATEGORIES, json={"name": "Action", "description": "Action films"})
    assert resp.status_code == 201
    assert resp.json()["id"] == 1

    resp = client.post(MOVIES, json=_die_hard(1))
    assert resp.status_code == 201
    movie = resp.json()
    assert movie["category_id"] == 1
    assert "category_name" not in movie

    resp = client.get(f"{MOVIES}/{movie['id']}")
    assert resp.status_code == 200
    assert resp.json()["category_name"] == "Action"
    assert resp.json()["category_description"] == "Action films"

    resp = client.post(MOVIES, json=_die_hard(999))
    assert resp.status_code == 404
    assert resp.json() == {"error": "Categoria não encontrada"}


def test_create_returns_plain_record(client, action):
    resp = client.post(MOVIES, json=_die_hard(action["id"]))
    assert resp.status_code == 201
    assert resp.json() == {
        "id": 1,
        "title": "Die Hard",
        "description": "John McClane against Hans Gruber",
        "category_id": action["id"],
        "release_date": "1988-07-15",
    }


def test_create_accepts_stored_column_spelling(client, action):
    payload = _die_hard(action["id"])
    payload["realease_date"] = payload.pop("release_date")

    resp = client.post(MOVIES, json=payload)
    assert resp.status_code == 201
    assert resp.json()["release_date"] == "1988-07-15"


def test_create_with_unknown_category_inserts_nothing(client, action):
    client.post(MOVIES, json=_die_hard(action["id"]))
    before = len(client.get(MOVIES).json())

    resp = client.post(MOVIES, json=_die_hard(999))
    assert resp.status_code == 404

    assert len(client.get(MOVIES).json()) == before


def test_find_missing(client):
    resp = client.get(f"{MOVIES}/5")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Filme não encontrado"}


def test_list_inlines_current_category_fields(client, action):
    drama = client.post(CATEGORIES, json={"name": "Drama", "description": "Feelings"}).json()
    client.post(MOVIES, json=_die_hard(action["id"]))
    client.post(MOVIES, json={"title": "Manchester by the Sea", "category_id": drama["id"]})

    client.put(CATEGORIES, json={"id": action["id"], "name": "Ação", "description": "Tiros"})

    movies = client.get(MOVIES).json()
    assert [(m["title"], m["category_name"], m["category_description"]) for m in movies] == [
        ("Die Hard", "Ação", "Tiros"),
        ("Manchester by the Sea", "Drama", "Feelings"),
    ]


def test_update_replaces_every_field(client, action):
    drama = client.post(CATEGORIES, json={"name": "Drama"}).json()
    movie = client.post(MOVIES, json=_die_hard(action["id"])).json()

    resp = client.put(
        MOVIES,
        json={"id": movie["id"], "title": "Die Hard 2", "category_id": drama["id"]},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "id": movie["id"],
        "title": "Die Hard 2",
        "description": None,
        "category_id": drama["id"],
        "release_date": None,
    }
    assert client.get(f"{MOVIES}/{movie['id']}").json()["category_name"] == "Drama"


def test_update_with_unknown_category(client, action):
    movie = client.post(MOVIES, json=_die_hard(action["id"])).json()

    resp = client.put(MOVIES, json=_die_hard(999, id=movie["id"], title="Changed"))
    assert resp.status_code == 404
    assert resp.json() == {"error": "Categoria não encontrada"}
    assert client.get(f"{MOVIES}/{movie['id']}").json()["title"] == "Die Hard"


def test_update_missing_id_is_a_silent_noop(client, action):
    resp = client.put(MOVIES, json=_die_hard(action["id"], id=404))
    assert resp.status_code == 200
    assert resp.json() is None
    assert client.get(MOVIES).json() == []


def test_delete(client, action):
    movie = client.post(MOVIES, json=_die_hard(action["id"])).json()

    resp = client.delete(f"{MOVIES}/{movie['id']}")
    assert resp.status_code == 204
    assert client.get(f"{MOVIES}/{movie['id']}").status_code == 404

    resp = client.delete(f"{MOVIES}/{movie['id']}")
    assert resp.status_code == 304


def test_create_then_find_returns_same_record(client, action):
    created = client.post(MOVIES, json=_die_hard(action["id"])).json()

    resp = client.get(f"{MOVIES}/{created['id']}")
    assert resp.status_code == 200
    found = resp.json()
    assert {key: found[key] for key in created} == created
    assert found["release_date"] == "1988-07-15"
