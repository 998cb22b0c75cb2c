"""
Tests for social links, featured contents and technologies.
"""


def social_link(platform="GitHub", **overrides):
    data = {
        "platform": platform,
        "username": "alice",
        "url": f"https://{platform.lower()}.com/alice",
        "iconName": platform.lower(),
    }
    data.update(overrides)
    return data


async def test_social_link_category_round_trip(client, alice):
    profile_id = alice["profile"]["id"]
    response = await client.post(
        f"/api/profile/{profile_id}/social-links",
        json=social_link("YouTube"),
        headers=alice["headers"],
    )
    assert response.status_code == 201
    link = response.json()
    assert link["category"] == "social"

    response = await client.patch(
        f"/api/social-links/{link['id']}/category",
        json={"category": "knowledge"},
        headers=alice["headers"],
    )
    assert response.json()["category"] == "knowledge"

    knowledge = await client.get(f"/api/profile/{profile_id}/social-links/category/knowledge")
    social = await client.get(f"/api/profile/{profile_id}/social-links/category/social")
    assert [item["id"] for item in knowledge.json()] == [link["id"]]
    assert social.json() == []


async def test_social_link_invalid_category(client, alice):
    response = await client.post(
        "/api/social-links",
        json=social_link(profileId=alice["profile"]["id"], category="video"),
        headers=alice["headers"],
    )
    assert response.status_code == 400


async def test_social_link_stats(client, alice):
    profile_id = alice["profile"]["id"]
    for payload in (
        social_link("GitHub"),
        social_link("LinkedIn", isVisible=False),
        social_link("Medium", category="knowledge"),
    ):
        await client.post(f"/api/profile/{profile_id}/social-links", json=payload, headers=alice["headers"])

    response = await client.get(f"/api/profile/{profile_id}/social-links/stats")
    assert response.json() == {
        "total": 3,
        "socialCount": 2,
        "knowledgeCount": 1,
        "categories": {"social": 2, "knowledge": 1},
        "visible": 2,
    }


async def test_social_links_sorted_by_order(client, alice):
    profile_id = alice["profile"]["id"]
    await client.post(f"/api/profile/{profile_id}/social-links", json=social_link("B", order=2), headers=alice["headers"])
    await client.post(f"/api/profile/{profile_id}/social-links", json=social_link("A", order=1), headers=alice["headers"])

    response = await client.get(f"/api/profile/{profile_id}/social-links")
    assert [item["platform"] for item in response.json()] == ["A", "B"]


async def test_social_link_update_and_delete_require_owner(client, alice, bob):
    response = await client.post(
        f"/api/profile/{alice['profile']['id']}/social-links",
        json=social_link(),
        headers=alice["headers"],
    )
    link_id = response.json()["id"]

    response = await client.patch(f"/api/social-links/{link_id}", json={"url": "https://evil"}, headers=bob["headers"])
    assert response.status_code == 403
    assert (await client.delete(f"/api/social-links/{link_id}", headers=bob["headers"])).status_code == 403

    assert (await client.delete(f"/api/social-links/{link_id}", headers=alice["headers"])).status_code == 204
    assert (await client.get(f"/api/social-links/{link_id}")).status_code == 404


async def test_featured_content_reorder(client, alice):
    profile_id = alice["profile"]["id"]
    ids = []
    for title in ("First", "Second", "Third"):
        response = await client.post(
            f"/api/profile/{profile_id}/featured-contents",
            json={"title": title, "imageUrl": "https://img.example/x.png", "linkUrl": f"https://blog.example/{title.lower()}"},
            headers=alice["headers"],
        )
        assert response.status_code == 201
        ids.append(response.json()["id"])

    response = await client.post(
        f"/api/profile/{profile_id}/featured-contents/reorder",
        json={"orderedIds": [ids[2], ids[0], ids[1]]},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    assert [item["title"] for item in response.json()] == ["Third", "First", "Second"]

    response = await client.get(f"/api/profile/{profile_id}/featured-contents")
    assert [item["order"] for item in response.json()] == [0, 1, 2]


async def test_featured_content_partial_update(client, alice):
    response = await client.post(
        "/api/featured-contents",
        json={"profileId": alice["profile"]["id"], "title": "Talk", "linkUrl": "https://slides.example/talk", "imageUrl": "https://img/x.png"},
        headers=alice["headers"],
    )
    content_id = response.json()["id"]

    response = await client.patch(
        f"/api/featured-contents/{content_id}",
        json={"title": "Conference talk"},
        headers=alice["headers"],
    )
    assert response.json()["title"] == "Conference talk"
    assert response.json()["linkUrl"] == "https://slides.example/talk"


async def test_technology_appended_to_end_of_category(client, alice):
    profile_id = alice["profile"]["id"]
    url = f"/api/profile/{profile_id}/technologies"

    python = await client.post(url, json={"name": "Python", "category": "backend"}, headers=alice["headers"])
    react = await client.post(url, json={"name": "React", "category": "frontend"}, headers=alice["headers"])
    go = await client.post(url, json={"name": "Go", "category": "backend", "proficiencyLevel": 70}, headers=alice["headers"])

    assert go.status_code == 201
    assert python.json()["order"] == 0
    assert react.json()["order"] == 0
    assert go.json()["order"] == 1
    assert go.json()["proficiencyLevel"] == 70
    assert python.json()["proficiencyLevel"] == 50

    response = await client.get(f"/api/profile/{profile_id}/technologies/category/backend")
    assert [item["name"] for item in response.json()] == ["Python", "Go"]


async def test_technology_validation(client, alice):
    url = f"/api/profile/{alice['profile']['id']}/technologies"

    response = await client.post(url, json={"name": "Rust", "category": "systems"}, headers=alice["headers"])
    assert response.status_code == 400

    response = await client.post(url, json={"name": "Rust", "category": "backend", "proficiencyLevel": 120}, headers=alice["headers"])
    assert response.status_code == 400


async def test_technology_reorder_is_scoped_to_category(client, alice):
    profile_id = alice["profile"]["id"]
    url = f"/api/profile/{profile_id}/technologies"
    backend = [
        (await client.post(url, json={"name": name, "category": "backend"}, headers=alice["headers"])).json()["id"]
        for name in ("Python", "Go", "Rust")
    ]
    react = (await client.post(url, json={"name": "React", "category": "frontend"}, headers=alice["headers"])).json()

    response = await client.post(
        f"{url}/category/backend/reorder",
        json={"orderedIds": [backend[2], backend[0], backend[1], react["id"]]},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Rust", "Python", "Go"]

    response = await client.get(f"{url}/category/frontend")
    assert response.json()[0]["order"] == 0


async def test_technology_update_and_delete(client, alice, bob):
    response = await client.post(
        "/api/technologies",
        json={"profileId": alice["profile"]["id"], "name": "Docker", "category": "devops", "yearsOfExperience": 3},
        headers=alice["headers"],
    )
    assert response.status_code == 201
    technology_id = response.json()["id"]

    response = await client.patch(
        f"/api/technologies/{technology_id}",
        json={"proficiencyLevel": 90},
        headers=alice["headers"],
    )
    assert response.json()["proficiencyLevel"] == 90
    assert response.json()["yearsOfExperience"] == 3

    assert (await client.delete(f"/api/technologies/{technology_id}", headers=bob["headers"])).status_code == 403
    assert (await client.delete(f"/api/technologies/{technology_id}", headers=alice["headers"])).status_code == 204
