import pytest
import requests
from unittest.mock import MagicMock, patch
from aguli_admin.services.backend import BackendClient, BackendError, http_error, multipart_fields

def _response(status_code=200, body=None, json_error=False):
    res = MagicMock()
    res.status_code = status_code
    if json_error:
        res.json.side_effect = ValueError("not json")
    else:
        res.json.return_value = body
    return res

def test_successful_envelope_is_returned():
    client = BackendClient("http://backend/", timeout=5, token="tok")
    with patch("aguli_admin.services.backend.requests.request", return_value=_response(200, {"success": True, "data": [1]})) as req:
        body = client.get("/api/v1/aguli_tv/ads/getall")

    assert body["data"] == [1]
    args, kwargs = req.call_args
    assert args == ("GET", "http://backend/api/v1/aguli_tv/ads/getall")
    assert kwargs["headers"]["Authorization"] == "Bearer tok"
    assert kwargs["timeout"] == 5

def test_bare_list_payload_without_success_key_passes():
    client = BackendClient("http://backend")
    with patch("aguli_admin.services.backend.requests.request", return_value=_response(200, {"videos": []})):
        assert client.get("/x") == {"videos": []}

def test_http_error_carries_backend_message():
    client = BackendClient("http://backend")
    with patch("aguli_admin.services.backend.requests.request", return_value=_response(400, {"message": "Bad thumb"})):
        with pytest.raises(BackendError) as exc:
            client.post("/x", json={})
    assert exc.value.message == "Bad thumb"
    assert exc.value.status_code == 400

def test_success_false_is_an_error():
    client = BackendClient("http://backend")
    with patch("aguli_admin.services.backend.requests.request", return_value=_response(200, {"success": False, "message": "nope"})):
        with pytest.raises(BackendError, match="nope"):
            client.delete("/x")

def test_network_failure_is_wrapped_and_not_retried():
    client = BackendClient("http://backend")
    with patch("aguli_admin.services.backend.requests.request", side_effect=requests.ConnectionError("refused")) as req:
        with pytest.raises(BackendError, match="unreachable"):
            client.get("/x")
    assert req.call_count == 1

def test_non_json_body():
    client = BackendClient("http://backend")
    with patch("aguli_admin.services.backend.requests.request", return_value=_response(502, json_error=True)):
        with pytest.raises(BackendError, match="HTTP 502"):
            client.get("/x")

def test_http_error_mapping():
    assert http_error(BackendError("gone", 404)).status_code == 404
    assert http_error(BackendError("boom", 500)).status_code == 502
    assert http_error(BackendError("down")).status_code == 502

def test_multipart_fields_stringify_values():
    assert multipart_fields({"ads_sequence": 3}) == [("ads_sequence", (None, "3"))]
