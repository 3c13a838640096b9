"""Prediction clients against an in-process httpx transport and a local server."""
import threading
import time
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import httpx
import pytest

from personinfo.domain.exceptions import (
    InvalidSubjectError, ProviderTimeoutError, ProviderUnavailableError,
)
from personinfo.infra.predictors import AgifyClient, GenderizeClient, NationalizeClient
from personinfo.infra.predictors.nationalize import pick_country


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _json(body, status=200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=body)
    return handler


def test_age_sends_name_query_parameter():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(200, json={"name": "John", "age": 30, "count": 100})

    age = AgifyClient("https://api.agify.io", client=_client(handler)).age("John")
    assert age == 30
    assert seen["url"].params["name"] == "John"
    assert seen["url"].host == "api.agify.io"


@pytest.mark.parametrize("age", [None, 0])
def test_age_without_prediction_is_invalid_subject(age):
    client = AgifyClient("https://api.agify.io", client=_client(_json({"name": "Zzqx", "age": age})))
    with pytest.raises(InvalidSubjectError):
        client.age("Zzqx")


def test_gender_returns_label():
    client = GenderizeClient(
        "https://api.genderize.io",
        client=_client(_json({"name": "John", "gender": "male", "probability": 0.99})),
    )
    assert client.gender("John") == "male"


def test_gender_null_is_invalid_subject():
    client = GenderizeClient(
        "https://api.genderize.io",
        client=_client(_json({"name": "Zzqx", "gender": None, "probability": 0.0})),
    )
    with pytest.raises(InvalidSubjectError):
        client.gender("Zzqx")


def test_nationality_picks_most_probable_country():
    body = {"name": "John", "country": [
        {"country_id": "IE", "probability": 0.05},
        {"country_id": "US", "probability": 0.09},
        {"country_id": "GB", "probability": 0.07},
    ]}
    client = NationalizeClient("https://api.nationalize.io", client=_client(_json(body)))
    assert client.nationality("John") == "US"


def test_nationality_empty_candidates_is_invalid_subject():
    client = NationalizeClient(
        "https://api.nationalize.io", client=_client(_json({"name": "Zzqx", "country": []})),
    )
    with pytest.raises(InvalidSubjectError):
        client.nationality("Zzqx")


def test_pick_country_keeps_first_on_tie():
    assert pick_country([
        {"country_id": "RU", "probability": 0.4},
        {"country_id": "UA", "probability": 0.4},
    ]) == "RU"


def test_timeout_maps_to_provider_timeout():
    def handler(request):
        raise httpx.ReadTimeout("too slow", request=request)

    client = AgifyClient("https://api.agify.io", timeout=0.5, client=_client(handler))
    with pytest.raises(ProviderTimeoutError):
        client.age("John")


def test_connection_error_maps_to_unavailable():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    client = GenderizeClient("https://api.genderize.io", client=_client(handler))
    with pytest.raises(ProviderUnavailableError):
        client.gender("John")


def test_error_status_maps_to_unavailable():
    client = NationalizeClient(
        "https://api.nationalize.io",
        client=_client(_json({"error": "Request limit reached"}, status=429)),
    )
    with pytest.raises(ProviderUnavailableError):
        client.nationality("John")


def test_non_json_body_maps_to_unavailable():
    def handler(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    client = AgifyClient("https://api.agify.io", client=_client(handler))
    with pytest.raises(ProviderUnavailableError):
        client.age("John")


def test_close_leaves_shared_client_open():
    shared = _client(_json({"age": 30}))
    AgifyClient("https://api.agify.io", client=shared).close()
    assert not shared.is_closed


@pytest.fixture
def trickling_server():
    """Local HTTP server that sends a valid body one byte at a time."""
    body = b'{"name": "John", "age": 30}' + b" " * 40

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            try:
                for i in range(len(body)):
                    self.wfile.write(body[i:i + 1])
                    self.wfile.flush()
                    time.sleep(0.05)
            except (BrokenPipeError, ConnectionResetError):
                pass

        def log_message(self, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


def test_slow_body_is_cut_off_at_the_call_timeout(trickling_server):
    http = httpx.Client(trust_env=False)
    client = AgifyClient(trickling_server, timeout=0.5, client=http)
    started = time.monotonic()
    try:
        with pytest.raises(ProviderTimeoutError):
            client.age("John")
    finally:
        http.close()
    # each byte arrives well within the read timeout; only the overall deadline stops it
    assert time.monotonic() - started < 1.5


def test_nationality_skips_candidates_without_numeric_probability():
    assert pick_country([
        {"country_id": "RU", "probability": "high"},
        {"country_id": "UA", "probability": None},
        {"country_id": "KZ", "probability": 0.2},
    ]) == "KZ"


def test_nationality_with_only_malformed_candidates_is_invalid_subject():
    body = {"name": "John", "country": [{"country_id": "RU", "probability": "high"}]}
    client = NationalizeClient("https://api.nationalize.io", client=_client(_json(body)))
    with pytest.raises(InvalidSubjectError):
        client.nationality("John")
