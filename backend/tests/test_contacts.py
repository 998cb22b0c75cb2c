"""
Tests for the contact book.
"""


async def add_contact(client, owner, other, **extra):
    return await client.post(
        "/api/contacts",
        json={"contactProfileId": other["profile"]["id"], **extra},
        headers=owner["headers"],
    )


async def test_add_contact_includes_profile(client, alice, bob):
    response = await add_contact(client, alice, bob, notes="Met at PyCon")

    assert response.status_code == 201
    data = response.json()
    assert data["category"] == "default"
    assert data["notes"] == "Met at PyCon"
    assert data["contactProfile"]["name"] == "bob"
    assert data["lastViewedAt"] is None


async def test_duplicate_contact_conflicts(client, alice, bob):
    await add_contact(client, alice, bob)
    response = await add_contact(client, alice, bob)

    assert response.status_code == 409
    assert response.json()["detail"] == "Contact already exists"


async def test_unknown_profile(client, alice):
    response = await client.post("/api/contacts", json={"contactProfileId": 999}, headers=alice["headers"])
    assert response.status_code == 404


async def test_list_only_own_contacts(client, alice, bob):
    await add_contact(client, alice, bob)

    assert len((await client.get("/api/contacts", headers=alice["headers"])).json()) == 1
    assert (await client.get("/api/contacts", headers=bob["headers"])).json() == []


async def test_viewing_contact_records_time(client, alice, bob):
    contact = (await add_contact(client, alice, bob)).json()

    response = await client.get(f"/api/contacts/{contact['id']}", headers=alice["headers"])
    assert response.status_code == 200
    assert response.json()["lastViewedAt"] is not None


async def test_update_and_delete_contact(client, alice, bob):
    contact = (await add_contact(client, alice, bob)).json()
    url = f"/api/contacts/{contact['id']}"

    response = await client.patch(url, json={"category": "work"}, headers=alice["headers"])
    assert response.json()["category"] == "work"

    assert (await client.get(url, headers=bob["headers"])).status_code == 403
    assert (await client.delete(url, headers=alice["headers"])).status_code == 204
    assert (await client.get(url, headers=alice["headers"])).status_code == 404
