"""
Tests for profile reads, partial updates and section ordering.
"""
from linkbio.core.config import settings
from linkbio.core.sections import DEFAULT_SECTION_ORDER


async def test_patch_merges_only_given_fields(client, alice):
    profile_id = alice["profile"]["id"]

    response = await client.patch(
        f"/api/profile/{profile_id}",
        json={"bio": "Backend developer", "location": "Kraków"},
        headers=alice["headers"],
    )
    assert response.status_code == 200

    response = await client.patch(f"/api/profile/{profile_id}", json={"name": "Alice A."}, headers=alice["headers"])
    data = response.json()
    assert data["name"] == "Alice A."
    assert data["bio"] == "Backend developer"
    assert data["location"] == "Kraków"


async def test_patch_rejects_null_for_required_field(client, alice):
    response = await client.patch(
        f"/api/profile/{alice['profile']['id']}",
        json={"name": None},
        headers=alice["headers"],
    )
    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == ["name"]


async def test_patch_rejects_out_of_range_image_index(client, alice):
    response = await client.patch(
        f"/api/profile/{alice['profile']['id']}",
        json={"imageIndex": 3},
        headers=alice["headers"],
    )
    assert response.status_code == 400


async def test_patch_requires_owner(client, alice, bob):
    response = await client.patch(
        f"/api/profile/{alice['profile']['id']}",
        json={"bio": "hijacked"},
        headers=bob["headers"],
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "You don't have permission to modify this profile"


async def test_patch_unknown_profile(client, alice):
    response = await client.patch("/api/profile/9999", json={"bio": "x"}, headers=alice["headers"])
    assert response.status_code == 404


async def test_patch_requires_token(client, alice):
    response = await client.patch(f"/api/profile/{alice['profile']['id']}", json={"bio": "x"})
    assert response.status_code == 401


async def test_contact_update_clears_fields(client, alice):
    profile_id = alice["profile"]["id"]
    await client.patch(
        f"/api/profile/{profile_id}/contact",
        json={"email": "alice@example.com", "phone": "+48 123", "cvUrl": "https://example.com/cv.pdf"},
        headers=alice["headers"],
    )

    response = await client.patch(
        f"/api/profile/{profile_id}/contact",
        json={"email": "", "phone": None, "cvUrl": ""},
        headers=alice["headers"],
    )
    data = response.json()
    assert data["email"] is None
    assert data["phone"] is None
    assert data["cvUrl"] is None


async def test_contact_update_validates_email_and_cv_url(client, alice):
    profile_id = alice["profile"]["id"]

    response = await client.patch(f"/api/profile/{profile_id}/contact", json={"email": "nope"}, headers=alice["headers"])
    assert response.status_code == 400

    response = await client.patch(f"/api/profile/{profile_id}/contact", json={"cvUrl": "ftp://x"}, headers=alice["headers"])
    assert response.status_code == 400


async def test_background_gradient_round_trip(client, alice):
    gradient = {"colorFrom": "#000000", "colorTo": "#ffffff", "direction": "to right"}
    response = await client.patch(
        f"/api/profile/{alice['profile']['id']}/background",
        json={"backgroundIndex": 1, "backgroundGradient": gradient},
        headers=alice["headers"],
    )
    data = response.json()
    assert data["backgroundIndex"] == 1
    assert data["backgroundGradient"] == gradient


async def test_github_settings_alias_route(client, alice):
    profile_id = alice["profile"]["id"]
    response = await client.patch(
        f"/api/profile/{profile_id}/github",
        json={"githubUsername": "octocat", "showGithubStats": False},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    assert response.json()["githubUsername"] == "octocat"
    assert response.json()["showGithubStats"] is False


async def test_section_order_is_normalized(client, alice):
    response = await client.patch(
        f"/api/profile/{alice['profile']['id']}/section-visibility",
        json={"sectionOrder": ["github", "contact", "featured", "github"], "showTryHackMe": True},
        headers=alice["headers"],
    )
    assert response.status_code == 200
    order = response.json()["sectionOrder"]
    assert order[:4] == ["image", "contact", "github", "featured"]
    assert sorted(order) == sorted(DEFAULT_SECTION_ORDER)
    assert response.json()["showTryHackMe"] is True


async def test_section_order_rejects_unknown_ids(client, alice):
    response = await client.patch(
        f"/api/profile/{alice['profile']['id']}/section-visibility",
        json={"sectionOrder": ["image", "guestbook"]},
        headers=alice["headers"],
    )
    assert response.status_code == 400


async def test_public_profile_payload(client, alice):
    profile_id = alice["profile"]["id"]
    await client.patch(
        f"/api/profile/{profile_id}/section-visibility",
        json={"showKnowledge": False},
        headers=alice["headers"],
    )
    await client.post(
        f"/api/profile/{profile_id}/social-links",
        json={"platform": "GitHub", "username": "alice", "url": "https://github.com/alice", "iconName": "github"},
        headers=alice["headers"],
    )

    response = await client.get("/api/profile/public/alice")
    assert response.status_code == 200
    data = response.json()
    assert data["profile"]["id"] == profile_id
    assert len(data["socialLinks"]) == 1
    assert data["featuredContents"] == []
    assert "knowledge" not in data["sections"]
    assert "tryhackme" not in data["sections"]


async def test_public_profile_unknown_user(client):
    response = await client.get("/api/profile/public/ghost")
    assert response.status_code == 404


async def test_landing_profile_without_users(client):
    response = await client.get("/api/profile")
    assert response.status_code == 404
    assert response.json()["detail"] == "No users found"


async def test_landing_profile_uses_first_user(client, alice, bob):
    response = await client.get("/api/profile")
    assert response.json()["profile"]["id"] == alice["profile"]["id"]


async def test_landing_profile_uses_configured_user(client, alice, bob, monkeypatch):
    monkeypatch.setattr(settings, "DEMO_USER_ID", bob["user"]["id"])
    response = await client.get("/api/profile")
    assert response.json()["profile"]["id"] == bob["profile"]["id"]


async def test_get_profile_by_id_and_user(client, alice):
    response = await client.get(f"/api/profile/{alice['profile']['id']}")
    assert response.json()["name"] == "alice"

    response = await client.get(f"/api/profile/user/{alice['user']['id']}")
    assert response.json()["id"] == alice["profile"]["id"]
