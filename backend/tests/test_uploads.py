"""
Tests for image uploads.
"""
import io

from linkbio.core.config import settings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


async def test_upload_image(client, alice, upload_dir):
    response = await client.post(
        "/api/upload/image",
        files={"image": ("screen.png", PNG_BYTES, "image/png")},
        headers=alice["headers"],
    )

    assert response.status_code == 200
    data = response.json()
    assert data["filename"].startswith("issue-image-")
    assert data["filename"].endswith(".png")
    assert data["url"] == f"/uploads/{data['filename']}"
    assert data["originalname"] == "screen.png"
    assert data["size"] == len(PNG_BYTES)
    assert (upload_dir / data["filename"]).read_bytes() == PNG_BYTES


async def test_uploaded_file_is_served(client, alice, upload_dir):
    response = await client.post(
        "/api/upload/image",
        files={"image": ("a.png", PNG_BYTES, "image/png")},
        headers=alice["headers"],
    )

    served = await client.get(response.json()["url"])
    assert served.status_code == 200
    assert served.content == PNG_BYTES


async def test_upload_rejects_non_image(client, alice, upload_dir):
    response = await client.post(
        "/api/upload/image",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=alice["headers"],
    )
    assert response.status_code == 400
    assert "Unsupported file format" in response.json()["detail"]


async def test_upload_rejects_large_file(client, alice, upload_dir, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 16)
    response = await client.post(
        "/api/upload/image",
        files={"image": ("big.png", PNG_BYTES, "image/png")},
        headers=alice["headers"],
    )
    assert response.status_code == 400
    assert "File too large" in response.json()["detail"]


async def test_upload_without_file(client, alice):
    response = await client.post("/api/upload/image", headers=alice["headers"])
    assert response.status_code == 400
    assert response.json()["detail"] == "No file uploaded"


async def test_upload_requires_token(client):
    response = await client.post("/api/upload/image", files={"image": ("a.png", PNG_BYTES, "image/png")})
    assert response.status_code == 401


async def test_profile_image_upload_sets_custom_image(client, alice, bob, upload_dir):
    profile_id = alice["profile"]["id"]
    files = {"image": ("me.jpg", b"\xff\xd8\xff" + b"\x00" * 32, "image/jpeg")}

    response = await client.post(f"/api/profile/{profile_id}/upload-image", files=files, headers=bob["headers"])
    assert response.status_code == 403

    response = await client.post(f"/api/profile/{profile_id}/upload-image", files=files, headers=alice["headers"])
    assert response.status_code == 200
    data = response.json()
    assert data["filename"].startswith("profile-image-")
    assert data["imageUrl"] == data["url"]
    assert data["profile"]["customImageUrl"] == data["url"]


async def test_stored_extension_follows_content_type(client, alice, upload_dir):
    response = await client.post(
        "/api/upload/image",
        files={"image": ("page.html", b"<script>alert(1)</script>", "image/png")},
        headers=alice["headers"],
    )

    assert response.status_code == 200
    data = response.json()
    assert data["filename"].endswith(".png")
    assert data["originalname"] == "page.html"

    served = await client.get(data["url"])
    assert served.headers["content-type"] == "image/png"


async def test_image_write_runs_in_threadpool(upload_dir, monkeypatch):
    from fastapi import UploadFile
    from starlette.datastructures import Headers

    from linkbio.core import uploads

    calls = []

    async def recording_threadpool(func, *args):
        calls.append(func)
        return func(*args)

    monkeypatch.setattr(uploads, "run_in_threadpool", recording_threadpool)
    upload = UploadFile(
        io.BytesIO(PNG_BYTES),
        filename="a.gif",
        headers=Headers({"content-type": "image/gif"}),
    )

    stored = await uploads.save_image(upload, prefix="test", upload_dir=upload_dir)

    assert len(calls) == 1
    assert stored["filename"].endswith(".gif")
    assert (upload_dir / stored["filename"]).read_bytes() == PNG_BYTES
