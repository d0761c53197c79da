"""
Google Gemini image client (Nano Banana).

Each operation performs exactly one POST to the Gemini generateContent REST
endpoint: the request is shaped by `request_builder`, the response is
normalized by `response_parser`. There is no retry, caching or streaming;
every failure is raised to the caller as a `GeminiImageError`.
"""

import logging
import time
from typing import Any, Awaitable, Callable, Sequence, TypeVar

import httpx

from ..config.constants import GEMINI_API_BASE_URL
from ..exceptions import (
    ConnectionFailedError,
    GeminiImageError,
    InvalidResponseError,
    MissingCredentialError,
    NoImagesProvidedError,
    TransportError,
)
from ..services.logging_config import log_event
from .base import GeneratedImage, ImageInput, ThinkingConfig
from .request_builder import (
    DEFAULT_CATALOG,
    GenerationRequest,
    ModelCatalog,
    PreparedRequest,
    build_description_request,
    build_generation_request,
    endpoint_url,
)
from .response_parser import parse_description_response, parse_generation_response

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GeminiImageClient:
    """
    Client for Gemini image generation, editing and description.

    The API key and model catalog are fixed at construction and shared,
    read-only, by every call; concurrent calls need no coordination.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        catalog: ModelCatalog = DEFAULT_CATALOG,
        base_url: str = GEMINI_API_BASE_URL,
        timeout: float | None = None,
        log_prompts: bool = False,
    ):
        """Initialize the client; an empty API key is rejected."""
        if not api_key:
            raise MissingCredentialError()
        self._api_key = api_key
        self._catalog = catalog
        self._base_url = base_url
        self._timeout = timeout
        self._log_prompts = log_prompts

    @property
    def catalog(self) -> ModelCatalog:
        return self._catalog

    async def generate_image(
        self,
        prompt: str,
        *,
        images: Sequence[ImageInput] | None = None,
        aspect_ratio: str | None = None,
        image_size: str | None = None,
        model: str | None = None,
        person_generation: str | None = None,
        use_google_search: bool = False,
        thinking_config: ThinkingConfig | None = None,
    ) -> GeneratedImage:
        """
        Generate an image from a prompt and optional reference images.

        Args:
            prompt: Text description of the desired image
            images: Reference images, sent after the prompt in order
            aspect_ratio: One of the supported aspect ratios
            image_size: Resolution tier (512px, 1K, 2K, 4K)
            model: Allow-listed model identifier (default from the catalog)
            person_generation: Person generation policy
            use_google_search: Ground the generation on Google Search results
            thinking_config: Reasoning depth, passed through verbatim

        Returns:
            GeneratedImage with image data and any accompanying text
        """
        prepared = build_generation_request(
            GenerationRequest(
                prompt=prompt,
                images=tuple(images or ()),
                aspect_ratio=aspect_ratio,
                image_size=image_size,
                model=model,
                person_generation=person_generation,
                use_google_search=use_google_search,
                thinking_config=thinking_config,
            ),
            self._catalog,
        )

        logger.info(
            f"Generating image with Gemini model={prepared.model}, "
            f"aspect_ratio={aspect_ratio}, image_size={image_size}"
        )
        return await self._run(
            "generate_image",
            prepared,
            parse_generation_response,
            prompt=prompt,
            image_count=len(images or ()),
            use_google_search=use_google_search,
        )

    async def edit_image(
        self,
        prompt: str,
        images: Sequence[ImageInput] | None,
        *,
        model: str | None = None,
        person_generation: str | None = None,
    ) -> GeneratedImage:
        """
        Edit one or more images according to instructions.

        Raises:
            NoImagesProvidedError: If no images are given
        """
        if not images:
            # The allow-list is still checked first
            self._catalog.resolve(model)
            raise NoImagesProvidedError()

        return await self.generate_image(
            prompt,
            images=images,
            model=model,
            person_generation=person_generation,
        )

    async def describe_image(
        self,
        images: Sequence[ImageInput] | None,
        *,
        prompt: str | None = None,
        model: str | None = None,
    ) -> str:
        """Describe one or more images, returning the model's text."""
        prepared = build_description_request(images, prompt, model, self._catalog)

        logger.info(f"Describing {len(images or ())} image(s) with Gemini model={prepared.model}")
        return await self._run(
            "describe_image",
            prepared,
            parse_description_response,
            prompt=prompt,
            image_count=len(images or ()),
        )

    async def _run(
        self,
        operation: str,
        prepared: PreparedRequest,
        parse: Callable[[dict[str, Any]], T],
        *,
        prompt: str | None,
        image_count: int,
        **fields: Any,
    ) -> T:
        """Send a prepared request and normalize its response."""
        event_fields: dict[str, Any] = {
            "operation": operation,
            "model": prepared.model,
            "image_count": image_count,
            **fields,
        }
        if self._log_prompts:
            event_fields["prompt"] = prompt
        log_event("gemini_request", **event_fields)

        start_time = time.time()
        try:
            result = parse(await self._post(prepared))
        except GeminiImageError as e:
            logger.warning(f"Gemini {operation} failed: {e}")
            log_event(
                "gemini_error",
                operation=operation,
                model=prepared.model,
                error=type(e).__name__,
                message=str(e),
            )
            raise

        log_event(
            "gemini_response",
            operation=operation,
            model=prepared.model,
            outcome="success",
            elapsed_seconds=round(time.time() - start_time, 3),
        )
        return result

    async def _post(self, prepared: PreparedRequest) -> dict[str, Any]:
        """POST the body to the model endpoint and return the decoded JSON."""
        url = endpoint_url(self._base_url, prepared.model)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(url, params={"key": self._api_key}, json=prepared.body)
        except httpx.HTTPError as e:
            raise ConnectionFailedError(e) from e

        if not response.is_success:
            raise TransportError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise InvalidResponseError(response.status_code) from e

        if not isinstance(data, dict):
            raise InvalidResponseError(response.status_code)
        return data
