"""Tests for the Gemini image client."""

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from nano_banana_mcp.config.constants import DEFAULT_DESCRIBE_PROMPT, GEMINI_API_BASE_URL
from nano_banana_mcp.exceptions import (
    ConnectionFailedError,
    EmptyResponseError,
    InvalidModelError,
    InvalidResponseError,
    MissingCredentialError,
    NoImagesProvidedError,
    NoResponseError,
    ProviderError,
    TransportError,
)
from nano_banana_mcp.providers import GeminiImageClient, ImageInput, ModelCatalog, ThinkingConfig

DEFAULT_URL = (
    f"{GEMINI_API_BASE_URL}/gemini-3.1-flash-image-preview:generateContent?key=test-key"
)

IMAGE_BODY = {
    "candidates": [
        {
            "content": {
                "parts": [
                    {"text": "Composing the scene", "thought": True},
                    {"text": "A red fox in the snow"},
                    {"inlineData": {"mimeType": "image/png", "data": "iVBORw0KGgo="}},
                ]
            },
            "groundingMetadata": {"webSearchQueries": ["red fox habitat"]},
        }
    ]
}


def sent_body(httpx_mock: HTTPXMock) -> dict:
    return json.loads(httpx_mock.get_request().content)


@pytest.fixture
def client():
    return GeminiImageClient("test-key")


class TestConstruction:
    """Tests for client construction."""

    @pytest.mark.parametrize("api_key", ["", None])
    def test_missing_api_key(self, api_key):
        with pytest.raises(MissingCredentialError, match="GEMINI_API_KEY is required"):
            GeminiImageClient(api_key)

    def test_default_catalog(self, client):
        assert client.catalog.default == "gemini-3.1-flash-image-preview"


class TestGenerateImage:
    """Tests for image generation."""

    @pytest.mark.asyncio
    async def test_generate_success(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, method="POST", json=IMAGE_BODY)

        result = await client.generate_image("A red fox", aspect_ratio="16:9", image_size="2K")

        assert result.mime_type == "image/png"
        assert result.base64_data == "iVBORw0KGgo="
        assert result.description == "A red fox in the snow"
        assert result.thoughts == "Composing the scene"
        assert result.search_queries == ("red fox habitat",)

        body = sent_body(httpx_mock)
        assert body["contents"] == [{"parts": [{"text": "A red fox"}]}]
        assert body["generationConfig"] == {
            "responseModalities": ["TEXT", "IMAGE"],
            "imageConfig": {"aspectRatio": "16:9", "imageSize": "2K"},
        }
        assert "tools" not in body

    @pytest.mark.asyncio
    async def test_model_selects_endpoint(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=f"{GEMINI_API_BASE_URL}/gemini-2.0-flash-exp:generateContent?key=test-key",
            json=IMAGE_BODY,
        )

        await client.generate_image(
            "A red fox", model="gemini-2.0-flash-exp", aspect_ratio="16:9", image_size="2K"
        )

        assert "imageConfig" not in sent_body(httpx_mock)["generationConfig"]

    @pytest.mark.asyncio
    async def test_grounding_and_thinking(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, json=IMAGE_BODY)

        await client.generate_image(
            "Weather in Tokyo",
            use_google_search=True,
            thinking_config=ThinkingConfig(thinking_level="HIGH"),
        )

        body = sent_body(httpx_mock)
        assert body["tools"] == [{"google_search": {}}]
        assert body["generationConfig"]["thinkingConfig"] == {"thinkingLevel": "HIGH"}

    @pytest.mark.asyncio
    async def test_reference_images_sent(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, json=IMAGE_BODY)

        await client.generate_image(
            "Same style", images=[ImageInput(data="abc", mime_type="image/jpeg")]
        )

        parts = sent_body(httpx_mock)["contents"][0]["parts"]
        assert parts[1] == {"inlineData": {"mimeType": "image/jpeg", "data": "abc"}}

    @pytest.mark.asyncio
    async def test_invalid_model_makes_no_request(self, client, httpx_mock: HTTPXMock):
        with pytest.raises(InvalidModelError, match="Invalid model: gpt-image-1"):
            await client.generate_image("A fox", model="gpt-image-1")

        assert httpx_mock.get_requests() == []

    @pytest.mark.asyncio
    async def test_transport_error(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, status_code=401, text="Unauthorized")

        with pytest.raises(TransportError) as exc_info:
            await client.generate_image("A fox")

        assert "401" in str(exc_info.value)
        assert "Unauthorized" in str(exc_info.value)
        assert exc_info.value.status_code == 401
        assert exc_info.value.body == "Unauthorized"

    @pytest.mark.asyncio
    async def test_connection_error(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"), url=DEFAULT_URL)

        with pytest.raises(
            ConnectionFailedError, match=r"Gemini request failed \(ConnectError\): Connection refused"
        ) as exc_info:
            await client.generate_image("A fox")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_error(self, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"), url=DEFAULT_URL)
        client = GeminiImageClient("test-key", timeout=5.0)

        with pytest.raises(ConnectionFailedError, match="ReadTimeout"):
            await client.generate_image("A fox")

    @pytest.mark.asyncio
    async def test_provider_error(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=DEFAULT_URL,
            json={"error": {"code": 400, "message": "API key not valid", "status": "INVALID_ARGUMENT"}},
        )

        with pytest.raises(ProviderError, match="Gemini API error: API key not valid"):
            await client.generate_image("A fox")

    @pytest.mark.asyncio
    async def test_empty_response(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, json={"candidates": []})

        with pytest.raises(EmptyResponseError):
            await client.generate_image("A fox")

    @pytest.mark.asyncio
    async def test_invalid_json(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, text="<html>oops</html>")

        with pytest.raises(InvalidResponseError):
            await client.generate_image("A fox")

    @pytest.mark.asyncio
    async def test_custom_catalog_and_base_url(self, httpx_mock: HTTPXMock):
        client = GeminiImageClient(
            "other-key",
            catalog=ModelCatalog(allowed=("test-image-model",), default="test-image-model"),
            base_url="https://gemini.example.test/v1beta/models",
        )
        httpx_mock.add_response(
            url="https://gemini.example.test/v1beta/models/test-image-model:generateContent?key=other-key",
            json=IMAGE_BODY,
        )

        result = await client.generate_image("A fox")
        assert result.base64_data == "iVBORw0KGgo="


class TestEditImage:
    """Tests for image editing."""

    @pytest.mark.asyncio
    async def test_edit_sends_images(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, json=IMAGE_BODY)

        result = await client.edit_image(
            "Make it winter", [ImageInput(data="src", mime_type="image/png")]
        )

        assert result.base64_data == "iVBORw0KGgo="
        body = sent_body(httpx_mock)
        assert body["contents"][0]["parts"] == [
            {"text": "Make it winter"},
            {"inlineData": {"mimeType": "image/png", "data": "src"}},
        ]
        assert "imageConfig" not in body["generationConfig"]
        assert "tools" not in body

    @pytest.mark.asyncio
    async def test_edit_requires_images(self, client, httpx_mock: HTTPXMock):
        with pytest.raises(NoImagesProvidedError, match="At least one image is required"):
            await client.edit_image("Make it winter", [])

        assert httpx_mock.get_requests() == []


class TestDescribeImage:
    """Tests for image description."""

    @pytest.mark.asyncio
    async def test_describe_default_prompt(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=DEFAULT_URL,
            json={"candidates": [{"content": {"parts": [{"text": "A fox "}, {"text": "sleeping."}]}}]},
        )

        description = await client.describe_image([ImageInput(data="abc", mime_type="image/png")])

        assert description == "A fox sleeping."
        body = sent_body(httpx_mock)
        assert body["contents"][0]["parts"][0] == {"text": DEFAULT_DESCRIBE_PROMPT}
        assert body["generationConfig"] == {"responseModalities": ["TEXT"]}

    @pytest.mark.asyncio
    async def test_describe_custom_prompt(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            url=DEFAULT_URL,
            json={"candidates": [{"content": {"parts": [{"text": "Two foxes"}]}}]},
        )

        await client.describe_image(
            [ImageInput(data="abc", mime_type="image/png")], prompt="How many animals?"
        )

        assert sent_body(httpx_mock)["contents"][0]["parts"][0] == {"text": "How many animals?"}

    @pytest.mark.asyncio
    async def test_describe_requires_images(self, client, httpx_mock: HTTPXMock):
        with pytest.raises(NoImagesProvidedError, match="At least one image is required"):
            await client.describe_image([])

        assert httpx_mock.get_requests() == []

    @pytest.mark.asyncio
    async def test_describe_no_response(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, json={"candidates": []})

        with pytest.raises(NoResponseError, match="No response from Gemini"):
            await client.describe_image([ImageInput(data="abc", mime_type="image/png")])

    @pytest.mark.asyncio
    async def test_describe_transport_error(self, client, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url=DEFAULT_URL, status_code=500, text="Internal error")

        with pytest.raises(TransportError, match=r"Gemini API error \(500\): Internal error"):
            await client.describe_image([ImageInput(data="abc", mime_type="image/png")])
