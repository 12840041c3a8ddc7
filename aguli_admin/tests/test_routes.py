import jwt
from unittest.mock import MagicMock, patch
from aguli_admin.services.backend import BackendError
from aguli_admin.services.compose import compose_store
from aguli_admin.tests.helpers import make_png

def _open(client, headers):
    res = client.post("/api/explore/compose", headers=headers)
    assert res.status_code == 200
    return res.json()["id"]

def _upload(client, headers, sid, names):
    files = [("images", (f"{n}.png", make_png(), "image/png")) for n in names]
    return client.post(f"/api/explore/compose/{sid}/images", headers=headers, files=files)

def _filenames(session):
    return [img["filename"] for img in session["images"]]

def test_compose_requires_login(client):
    assert client.post("/api/explore/compose").status_code == 401

def test_unknown_compose_session(client, auth_headers):
    assert client.get("/api/explore/compose/nope", headers=auth_headers).status_code == 404

def test_compose_flow_end_to_end(client, auth_headers, backend):
    sid = _open(client, auth_headers)
    res = client.patch(f"/api/explore/compose/{sid}", headers=auth_headers,
                       json={"title": "Rongali Bihu", "description": "Photos from Sivasagar", "status": "active"})
    assert res.json()["title"] == "Rongali Bihu"

    session = _upload(client, auth_headers, sid, ["1", "2", "3", "4", "5", "6"]).json()
    assert _filenames(session) == ["1.png", "2.png", "3.png", "4.png", "5.png"]

    client.post(f"/api/explore/compose/{sid}/drag/start", headers=auth_headers, json={"index": 4})
    session = client.post(f"/api/explore/compose/{sid}/drag/hover", headers=auth_headers, json={"index": 0}).json()
    assert session["dragging"] == 0
    session = client.post(f"/api/explore/compose/{sid}/drag/end", headers=auth_headers).json()
    assert session["dragging"] is None
    assert _filenames(session) == ["5.png", "1.png", "2.png", "3.png", "4.png"]

    session = client.delete(f"/api/explore/compose/{sid}/images/2", headers=auth_headers).json()
    assert _filenames(session) == ["5.png", "1.png", "3.png", "4.png"]

    backend.post.return_value = {"success": True, "message": "Explore post created"}
    res = client.post(f"/api/explore/compose/{sid}/submit", headers=auth_headers)

    assert res.status_code == 200
    assert res.json()["session"]["images"] == []
    path = backend.post.call_args.args[0]
    parts = backend.post.call_args.kwargs["files"]
    assert path == "/api/v1/aguli_tv/explore/add"
    assert [p[1][0] for p in parts if p[0] == "explore_thumb"] == ["5.png", "1.png", "3.png", "4.png"]

def test_non_images_never_reach_the_set(client, auth_headers):
    sid = _open(client, auth_headers)
    files = [
        ("images", ("a.png", make_png(), "image/png")),
        ("images", ("b.txt", b"text", "text/plain")),
    ]
    session = client.post(f"/api/explore/compose/{sid}/images", headers=auth_headers, files=files).json()
    assert _filenames(session) == ["a.png"]

def test_invalid_status_rejected(client, auth_headers):
    sid = _open(client, auth_headers)
    res = client.patch(f"/api/explore/compose/{sid}", headers=auth_headers, json={"status": "archived"})
    assert res.status_code == 422

def test_failed_submit_keeps_images(client, auth_headers, backend):
    sid = _open(client, auth_headers)
    client.patch(f"/api/explore/compose/{sid}", headers=auth_headers, json={"title": "t", "description": "d"})
    _upload(client, auth_headers, sid, ["a", "b"])
    backend.post.side_effect = BackendError("Backend unreachable: timeout")

    res = client.post(f"/api/explore/compose/{sid}/submit", headers=auth_headers)

    assert res.status_code == 502
    assert "unreachable" in res.json()["detail"]
    session = client.get(f"/api/explore/compose/{sid}", headers=auth_headers).json()
    assert _filenames(session) == ["a.png", "b.png"]
    assert session["submitting"] is False

def test_discard_compose_session(client, auth_headers):
    sid = _open(client, auth_headers)
    assert client.delete(f"/api/explore/compose/{sid}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/explore/compose/{sid}", headers=auth_headers).status_code == 404

def test_explore_list_filters_and_paginates(client, auth_headers, backend):
    backend.get.return_value = {"success": True, "data": [
        {"_id": str(i), "explore_title": f"Post {i}", "explore_status": "active" if i % 2 else "inactive"}
        for i in range(30)
    ]}
    res = client.get("/api/explore", headers=auth_headers, params={"status": "active", "page": 2})
    body = res.json()
    assert body["total"] == 15
    assert body["page"] == 2
    assert len(body["items"]) == 3

def test_ad_update_falls_back_to_current_values(client, auth_headers, backend):
    backend.get.return_value = {"success": True, "data": [
        {"_id": "ad1", "ads_name": "Tea", "ads_type": "banner", "ads_screen": "home",
         "ads_link": "https://tea.example", "ads_status": "active", "ads_sequence": 2},
    ]}
    backend.put.return_value = {"success": True}

    res = client.put("/api/ads/ad1", headers=auth_headers, data={"ads_name": "  ", "ads_link": "https://new.example"})

    assert res.status_code == 200
    sent = dict((name, value) for name, (_, value) in backend.put.call_args.kwargs["files"])
    assert sent["ads_name"] == "Tea"
    assert sent["ads_link"] == "https://new.example"
    assert sent["ads_sequence"] == "2"
    assert sent["ads_screen"] == "home"

def test_ad_update_unknown_ad(client, auth_headers, backend):
    backend.get.return_value = {"success": True, "data": []}
    assert client.put("/api/ads/missing", headers=auth_headers, data={}).status_code == 404

def test_category_add_requires_name_and_thumbnail(client, auth_headers, backend):
    res = client.post("/api/categories", headers=auth_headers, json={"cat_name": " ", "cat_thumb": ""})
    assert res.status_code == 422
    backend.post.assert_not_called()

def test_category_add_sends_key(client, auth_headers, backend):
    backend.post.return_value = {"success": True, "data": {"_id": "c1"}}
    res = client.post("/api/categories", headers=auth_headers,
                      json={"cat_name": "Sports", "cat_thumb": "https://img/s.png", "cat_order": "2"})
    assert res.status_code == 200
    kwargs = backend.post.call_args.kwargs
    assert kwargs["params"] == {"key": "saas-key"}
    assert kwargs["json"]["cat_order"] == 2

def test_livetv_lists_channels_only(client, auth_headers, backend):
    backend.get.return_value = {"success": True, "data": {"liveTVChannels": [{"_id": "1"}], "recentNews": [{"_id": "n"}]}}
    assert client.get("/api/livetv", headers=auth_headers).json() == [{"_id": "1"}]

def test_push_requires_fields(client, auth_headers, backend):
    res = client.post("/api/push-notifications/send", headers=auth_headers, json={"title": "Breaking"})
    assert res.status_code == 422
    backend.post.assert_not_called()

def test_push_sends_default_screen(client, auth_headers, backend):
    backend.post.return_value = {"success": True}
    res = client.post("/api/push-notifications/send", headers=auth_headers,
                      json={"title": "Breaking", "body": "Details", "news_id": "n1"})
    assert res.status_code == 200
    assert backend.post.call_args.kwargs["json"]["screen"] == "newsDetails"

def test_backend_failure_maps_to_bad_gateway(client, auth_headers, backend):
    backend.delete.side_effect = BackendError("Backend returned HTTP 500", 500)
    assert client.delete("/api/citizen/x1", headers=auth_headers).status_code == 502

def test_google_signin_sets_session_cookie(client):
    credential = jwt.encode({"sub": "g-123", "email": "editor@aguli.tv", "name": "Editor", "picture": "p"}, "google-test-signing-key-0123456789", algorithm="HS256")
    fake = MagicMock()
    fake.post.return_value = {"success": True, "data": {"_id": "u1", "email": "editor@aguli.tv", "token": "bt"}}

    with patch("aguli_admin.routes.auth.get_backend", return_value=fake):
        res = client.post("/auth/google/signin", json={"credential": credential})

    assert res.status_code == 200
    assert res.json()["redirect"] == "/users/videos-pages"
    assert "access_token=" in res.headers["set-cookie"]
    sent = fake.post.call_args.kwargs["json"]
    assert sent == {"googleId": "g-123", "email": "editor@aguli.tv", "full_name": "Editor", "profile_picture": "p"}

def test_google_signin_rejected(client):
    credential = jwt.encode({"sub": "g-1"}, "google-test-signing-key-0123456789", algorithm="HS256")
    fake = MagicMock()
    fake.post.side_effect = BackendError("Not an admin", 403)
    with patch("aguli_admin.routes.auth.get_backend", return_value=fake):
        res = client.post("/auth/google/signin", json={"credential": credential})
    assert res.status_code == 401

def test_malformed_credential(client):
    assert client.post("/auth/google/signin", json={"credential": "garbage"}).status_code == 400

def test_pages_redirect_to_login(client):
    res = client.get("/users/videos-pages", follow_redirects=False)
    assert res.status_code in (302, 307)
    assert res.headers["location"] == "/user-login"

def test_videos_page_renders(client, auth_headers):
    fake = MagicMock()
    fake.get.return_value = {"videos": [{"_id": "v1", "video_tittle": "<Morning news>", "createdat": "2024-01-01T00:00:00Z"}]}
    with patch("aguli_admin.routes.pages.get_backend", return_value=fake):
        res = client.get("/users/videos-pages", headers=auth_headers)
    assert res.status_code == 200
    assert "&lt;Morning news&gt;" in res.text
    assert "/users/videos-pages/v1/edit" in res.text

def test_compose_page_renders(client, auth_headers):
    res = client.get("/users/explore/add-explore", headers=auth_headers)
    assert res.status_code == 200
    assert "const MAX_IMAGES = 5;" in res.text

def test_video_upload_clears_url_fields(client, auth_headers, backend):
    backend.post.return_value = {"success": True}
    files = [
        ("video", ("clip.mp4", b"\x00\x00\x00\x18ftypmp42", "video/mp4")),
        ("thumbnail", ("thumb.png", make_png(), "image/png")),
    ]
    res = client.post("/api/videos", headers=auth_headers, files=files,
                      data={"video_tittle": "Evening bulletin", "video_url": "https://old", "thumbnail_url": "https://old.png"})

    assert res.status_code == 200
    parts = backend.post.call_args.kwargs["files"]
    assert [p[0] for p in parts[:2]] == ["video", "thumbnail"]
    sent = {name: value for name, (_, value, *rest) in parts[2:]}
    assert sent["video_url"] == ""
    assert sent["thumbnail_url"] == ""
    assert sent["video_tittle"] == "Evening bulletin"

def test_video_thumbnail_must_be_an_image(client, auth_headers, backend):
    files = [("thumbnail", ("thumb.png", b"not an image", "image/png"))]
    res = client.post("/api/videos", headers=auth_headers, files=files, data={"video_tittle": "x"})
    assert res.status_code == 400
    backend.post.assert_not_called()

def test_unknown_video(client, auth_headers, backend):
    backend.get.return_value = {"success": True, "data": None}
    assert client.get("/api/videos/missing", headers=auth_headers).status_code == 404

def test_compose_page_ends_drags_at_document_level(client, auth_headers):
    res = client.get("/users/explore/add-explore", headers=auth_headers)
    assert "document.addEventListener('dragend', endDrag);" in res.text
    assert "document.addEventListener('drop'" in res.text
    assert "tile.addEventListener('dragend'" not in res.text

def test_compose_page_sets_filenames_as_text(client, auth_headers):
    res = client.get("/users/explore/add-explore", headers=auth_headers)
    assert ".textContent = img.filename;" in res.text
    assert "${img.filename}" not in res.text

def test_explore_pager_links_are_url_encoded(client, auth_headers):
    fake = MagicMock()
    fake.get.return_value = {"success": True, "data": [
        {"_id": str(i), "explore_title": f"Tea & Bihu #{i}", "explore_status": "active"} for i in range(30)
    ]}
    with patch("aguli_admin.routes.pages.get_backend", return_value=fake):
        res = client.get("/users/explore", headers=auth_headers, params={"search": "tea & bihu #", "page": 2})
    assert res.status_code == 200
    assert 'href="?search=tea+%26+bihu+%23&amp;status=all&amp;page=3"' in res.text
    assert 'href="?search=tea+%26+bihu+%23&amp;status=all&amp;page=1"' in res.text

def test_submit_after_discard_returns_fresh_session(client, auth_headers, backend):
    sid = _open(client, auth_headers)
    client.patch(f"/api/explore/compose/{sid}", headers=auth_headers, json={"title": "t", "description": "d"})
    _upload(client, auth_headers, sid, ["a"])

    def post_then_discard(*args, **kwargs):
        compose_store.discard(sid)
        return {"success": True, "message": "Explore post created"}

    backend.post.side_effect = post_then_discard
    res = client.post(f"/api/explore/compose/{sid}/submit", headers=auth_headers)

    assert res.status_code == 200
    session = res.json()["session"]
    assert session["id"] != sid
    assert session["images"] == []
