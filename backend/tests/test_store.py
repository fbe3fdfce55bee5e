from landing.application.landing.store import InMemoryPageConfigStore, SqlPageConfigStore


def test_in_memory_store_copies_documents():
    store = InMemoryPageConfigStore()
    document = {"template_id": "bold-impact", "sections": []}

    store.put("tenant-1", document)
    document["template_id"] = "changed"

    stored = store.get("tenant-1")
    assert stored["template_id"] == "bold-impact"

    stored["sections"].append({"id": "hero"})
    assert store.get("tenant-1")["sections"] == []
    assert store.get("tenant-2") is None
    assert store.last_modified("tenant-1") is None


def test_sql_store_round_trip(app, tenant):
    store = SqlPageConfigStore()

    assert store.get(tenant.id) is None
    assert store.last_modified(tenant.id) is None

    store.put(tenant.id, {"template_id": "vintage-classic", "sections": []})
    store.put(tenant.id, {"template_id": "bold-impact", "sections": []})

    assert store.get(tenant.id) == {"template_id": "bold-impact", "sections": []}
    assert store.last_modified(tenant.id) is not None
