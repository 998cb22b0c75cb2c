"""
Tests for the Perplexity client and issue analysis.
"""
import json

import httpx
import pytest

from linkbio.ai.analysis import (
    ANALYSIS_FAILED_MESSAGE,
    analyze_issue,
    build_messages,
    split_analysis_sections,
)
from linkbio.ai.perplexity import PerplexityClient, PerplexityError
from linkbio.api.ai_analysis import get_perplexity_client

from main import app

ANALYSIS = """Krótkie wprowadzenie.

## Analiza problemu
Link prowadzi do nieistniejącej strony.

## Możliwe przyczyny
- literówka w adresie

### Sugerowane rozwiązania
Popraw adres w panelu administracyjnym.
"""


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def mock_client(handler, api_key="pplx-test"):
    return PerplexityClient(api_key=api_key, transport=httpx.MockTransport(handler))


def test_split_sections():
    sections = split_analysis_sections(ANALYSIS)

    assert [section["title"] for section in sections] == [
        None,
        "Analiza problemu",
        "Możliwe przyczyny",
        "Sugerowane rozwiązania",
    ]
    assert sections[0]["content"] == "Krótkie wprowadzenie."
    assert sections[2]["content"] == "- literówka w adresie"


def test_split_without_headings():
    assert split_analysis_sections("Po prostu tekst.") == [{"title": None, "content": "Po prostu tekst."}]
    assert split_analysis_sections("") == []


def test_split_drops_empty_intro():
    sections = split_analysis_sections("\n# Tytuł #\ntreść")
    assert sections == [{"title": "Tytuł", "content": "treść"}]


def test_build_messages_skips_missing_fields():
    messages = build_messages("Broken link")

    assert messages[0]["role"] == "system"
    assert "Tytuł: Broken link" in messages[1]["content"]
    assert "Opis" not in messages[1]["content"]


async def test_client_sends_request():
    captured = {}

    def handler(request):
        captured["auth"] = request.headers["Authorization"]
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=completion("ok"))

    client = mock_client(handler)
    content = await client.complete(build_messages("Broken link", "404 on click", "high"))

    assert content == "ok"
    assert captured["auth"] == "Bearer pplx-test"
    assert captured["body"]["temperature"] == 0.2
    assert "Priorytet: high" in captured["body"]["messages"][1]["content"]


async def test_client_requires_api_key():
    client = PerplexityClient(api_key="")
    with pytest.raises(PerplexityError):
        await client.chat([{"role": "user", "content": "hi"}])


async def test_client_error_status():
    client = mock_client(lambda request: httpx.Response(401, json={"error": "bad key"}))
    with pytest.raises(PerplexityError):
        await client.complete([{"role": "user", "content": "hi"}])


async def test_analyze_issue_falls_back_on_failure():
    client = mock_client(lambda request: httpx.Response(500))
    assert await analyze_issue("Broken link", client=client) == ANALYSIS_FAILED_MESSAGE


async def test_analyze_endpoint(client, alice):
    issue = (await client.post(
        f"/api/profile/{alice['profile']['id']}/issues",
        json={"title": "Broken link", "severity": "high"},
        headers=alice["headers"],
    )).json()
    app.dependency_overrides[get_perplexity_client] = lambda: mock_client(
        lambda request: httpx.Response(200, json=completion(ANALYSIS))
    )

    response = await client.get(f"/api/ai/issues/{issue['id']}/analyze", headers=alice["headers"])

    assert response.status_code == 200
    data = response.json()
    assert data["issue"]["id"] == issue["id"]
    assert data["analysis"] == ANALYSIS
    assert len(data["sections"]) == 4


async def test_analyze_endpoint_without_api_key(client, alice):
    issue = (await client.post(
        f"/api/profile/{alice['profile']['id']}/issues",
        json={"title": "Broken link"},
        headers=alice["headers"],
    )).json()

    response = await client.get(f"/api/ai/issues/{issue['id']}/analyze", headers=alice["headers"])

    assert response.status_code == 200
    assert response.json()["analysis"] == ANALYSIS_FAILED_MESSAGE
    assert response.json()["sections"] == [{"title": None, "content": ANALYSIS_FAILED_MESSAGE}]


async def test_analyze_other_users_issue(client, alice, bob):
    issue = (await client.post(
        f"/api/profile/{alice['profile']['id']}/issues",
        json={"title": "Broken link"},
        headers=alice["headers"],
    )).json()

    response = await client.get(f"/api/ai/issues/{issue['id']}/analyze", headers=bob["headers"])
    assert response.status_code == 403
