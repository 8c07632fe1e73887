"""Unit tests for LogoClient (mocked requests session)."""

import json
import logging
from unittest.mock import MagicMock

import pytest
import requests

from logogen.core.client import LogoClient
from logogen.core.config import Config
from logogen.core.image import ImagePayload
from logogen.core.prompt import build_generation_prompt
from logogen.logging_config import set_verbosity
from logogen.utils.exceptions import ConfigurationError, NoImageDataError, UpstreamError

IMAGE_BODY = {
    "candidates": [
        {
            "content": {
                "role": "model",
                "parts": [{"inlineData": {"data": "QUJD", "mimeType": "image/png"}}],
            },
            "finishReason": "STOP",
        }
    ]
}


def _response(status_code: int = 200, body: object = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    response.text = json.dumps(body)
    return response


def _client(session: MagicMock, **kwargs) -> LogoClient:
    return LogoClient(api_key="test-key", session=session, **kwargs)


def _session(response: MagicMock | None = None, side_effect: BaseException | None = None):
    session = MagicMock(spec=requests.Session)
    if side_effect is not None:
        session.post.side_effect = side_effect
    else:
        session.post.return_value = response
    return session


def _sent_json(session: MagicMock) -> dict:
    return session.post.call_args.kwargs["json"]


PRIOR = ImagePayload(bytes="QUJD", mime_type="image/png")


@pytest.mark.unit
class TestGenerate:
    def test_returns_inline_image(self):
        session = _session(_response(body=IMAGE_BODY))
        result = _client(session).generate("coffee shop for developers called CodeAndBrew")
        assert result == ImagePayload(bytes="QUJD", mime_type="image/png")
        assert result.mime_type.startswith("image/")
        assert result.bytes

    def test_request_shape(self):
        session = _session(_response(body=IMAGE_BODY))
        client = _client(session, model="gemini-2.5-flash-image", timeout=42)
        client.generate("bakery")

        session.post.assert_called_once()
        args, kwargs = session.post.call_args
        assert args[0] == (
            "https://generativelanguage.googleapis.com/v1beta/"
            "models/gemini-2.5-flash-image:generateContent"
        )
        assert kwargs["headers"]["x-goog-api-key"] == "test-key"
        assert kwargs["timeout"] == 42
        assert kwargs["json"] == {
            "contents": [{"parts": [{"text": build_generation_prompt("bakery")}]}],
            "generationConfig": {"responseModalities": ["IMAGE"]},
        }

    def test_image_survives_malformed_extra_candidate(self):
        body = {"candidates": IMAGE_BODY["candidates"] + ["garbage"]}
        result = _client(_session(_response(body=body))).generate("bakery")
        assert result == ImagePayload(bytes="QUJD", mime_type="image/png")

    def test_description_is_not_revalidated(self):
        session = _session(_response(body=IMAGE_BODY))
        _client(session).generate("")
        assert session.post.called

    def test_special_characters_do_not_raise(self):
        session = _session(_response(body=IMAGE_BODY))
        description = 'Joe\'s "Tacos"\n{open late}'
        _client(session).generate(description)
        text = _sent_json(session)["contents"][0]["parts"][0]["text"]
        assert description in text


@pytest.mark.unit
class TestRefine:
    def test_image_part_precedes_text_part(self):
        session = _session(_response(body=IMAGE_BODY))
        _client(session).refine(ImagePayload(bytes="QUJD", mime_type="image/png"), "use more blue")

        parts = _sent_json(session)["contents"][0]["parts"]
        assert len(parts) == 2
        assert parts[0] == {"inlineData": {"mimeType": "image/png", "data": "QUJD"}}
        assert "use more blue" in parts[1]["text"]
        assert _sent_json(session)["generationConfig"] == {"responseModalities": ["IMAGE"]}

    def test_returns_new_payload_and_leaves_prior_untouched(self):
        body = {
            "candidates": [
                {"content": {"parts": [{"inlineData": {"data": "WFla", "mimeType": "image/jpeg"}}]}}
            ]
        }
        session = _session(_response(body=body))
        prior = ImagePayload(bytes="QUJD", mime_type="image/png")
        result = _client(session).refine(prior, "more minimal")
        assert result == ImagePayload(bytes="WFla", mime_type="image/jpeg")
        assert prior == ImagePayload(bytes="QUJD", mime_type="image/png")
        assert result is not prior


EMPTY_BODIES = [
    pytest.param({}, id="no-candidates-key"),
    pytest.param({"candidates": []}, id="empty-candidates"),
    pytest.param({"candidates": [{"content": {"parts": []}}]}, id="no-parts"),
    pytest.param({"candidates": [{"content": {}}]}, id="content-without-parts"),
    pytest.param(
        {"candidates": [{"content": {"parts": [{"text": "Sorry, text only."}]}}]},
        id="text-only",
    ),
    pytest.param({"candidates": "unexpected"}, id="wrong-shape"),
]


@pytest.mark.unit
class TestNoImageData:
    @pytest.mark.parametrize("body", EMPTY_BODIES)
    def test_generate_raises(self, body):
        session = _session(_response(body=body))
        with pytest.raises(NoImageDataError) as exc_info:
            _client(session).generate("bakery")
        assert "No image data found" in str(exc_info.value)

    @pytest.mark.parametrize("body", EMPTY_BODIES)
    def test_refine_raises_with_refinement_message(self, body):
        session = _session(_response(body=body))
        with pytest.raises(NoImageDataError) as exc_info:
            _client(session).refine(PRIOR, "use more blue")
        assert "refined" in str(exc_info.value)

    def test_non_json_body(self):
        response = _response(body=None)
        response.json.side_effect = ValueError("Expecting value")
        response.text = "<html>oops</html>"
        with pytest.raises(NoImageDataError) as exc_info:
            _client(_session(response)).generate("bakery")
        assert "oops" in exc_info.value.response


@pytest.mark.unit
class TestUpstreamFailures:
    @pytest.mark.parametrize(
        "exc",
        [
            requests.exceptions.ConnectionError("connection refused"),
            requests.exceptions.Timeout("read timed out"),
            requests.exceptions.RequestException("boom"),
            RuntimeError("transport exploded"),
        ],
    )
    def test_transport_errors_are_wrapped(self, exc):
        session = _session(side_effect=exc)
        with pytest.raises(UpstreamError) as exc_info:
            _client(session).generate("bakery")
        err = exc_info.value
        assert type(err) is UpstreamError
        assert err.original_error is exc
        assert err.__cause__ is exc
        assert str(err) == "Failed to generate logo."
        assert "connection refused" not in str(err)

    def test_refine_uses_refinement_message(self):
        session = _session(side_effect=requests.exceptions.ConnectionError("down"))
        with pytest.raises(UpstreamError) as exc_info:
            _client(session).refine(PRIOR, "use more blue")
        assert str(exc_info.value) == "Failed to refine logo."

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 429, 500, 503])
    def test_http_errors(self, status_code):
        session = _session(_response(status_code=status_code, body={"error": {"message": "x"}}))
        with pytest.raises(UpstreamError) as exc_info:
            _client(session).generate("bakery")
        err = exc_info.value
        assert err.status_code == status_code
        assert isinstance(err.original_error, requests.HTTPError)
        assert str(err) == "Failed to generate logo."

    def test_failure_is_logged_with_cause(self, caplog):
        caplog.set_level(logging.ERROR, logger="logogen")
        session = _session(side_effect=requests.exceptions.ConnectionError("dns failure"))
        with pytest.raises(UpstreamError):
            _client(session).generate("bakery")
        assert "dns failure" in caplog.text
        assert "generation" in caplog.text

    def test_no_retry(self):
        session = _session(side_effect=requests.exceptions.ConnectionError("down"))
        with pytest.raises(UpstreamError):
            _client(session).generate("bakery")
        assert session.post.call_count == 1


@pytest.mark.unit
class TestClientConstruction:
    def test_empty_api_key_raises(self):
        with pytest.raises(ConfigurationError):
            LogoClient(api_key="")

    def test_from_config(self):
        config = Config(api_key="k", model="m", base_url="http://example.test/v1/", request_timeout=5)
        session = _session(_response(body=IMAGE_BODY))
        client = LogoClient.from_config(config, session=session)
        assert client.url == "http://example.test/v1/models/m:generateContent"
        assert client.timeout == 5
        assert config.is_valid() is True

    def test_from_config_missing_key_raises(self):
        with pytest.raises(ConfigurationError):
            LogoClient.from_config(Config(api_key=""))

    def test_repr_hides_api_key(self):
        client = LogoClient(api_key="super-secret", session=_session())
        assert "super-secret" not in repr(client)

    def test_close_leaves_injected_session_open(self):
        session = _session()
        with LogoClient(api_key="k", session=session):
            pass
        session.close.assert_not_called()

    def test_close_closes_owned_session(self):
        client = LogoClient(api_key="k")
        client._session = MagicMock()
        client.close()
        client._session.close.assert_called_once()


@pytest.mark.unit
class TestDebugLogging:
    def test_prompt_logged_only_when_enabled(self, caplog):
        caplog.set_level(logging.INFO, logger="logogen")
        session = _session(_response(body=IMAGE_BODY))
        set_verbosity(0)
        _client(session).generate("bakery")
        assert "Prompt (used)" not in caplog.text
        set_verbosity(1)
        try:
            _client(session).generate("bakery")
        finally:
            set_verbosity(0)
        assert "Prompt (used)" in caplog.text
        assert "bakery" in caplog.text

    def test_debug_api_logs_payload_without_image_data(self, caplog):
        caplog.set_level(logging.INFO, logger="logogen")
        long_data = "B" * 1000
        session = _session(_response(body=IMAGE_BODY))
        client = _client(session, debug_api=True)
        client.refine(ImagePayload(bytes=long_data, mime_type="image/png"), "use more blue")
        assert "API request payload" in caplog.text
        assert long_data not in caplog.text
        assert "test-key" not in caplog.text
