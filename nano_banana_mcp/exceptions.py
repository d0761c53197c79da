"""Gemini image adapter exceptions."""


class GeminiImageError(Exception):
    """Base exception for Gemini image adapter errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MissingCredentialError(GeminiImageError):
    """No API key supplied at construction."""

    def __init__(self) -> None:
        super().__init__("GEMINI_API_KEY is required")


class ConfigurationError(GeminiImageError, ValueError):
    """An environment variable holds a value that cannot be parsed."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"Invalid {name}: {value!r} is not {expected}")
        self.name = name
        self.value = value


class InvalidModelError(GeminiImageError, ValueError):
    """Model identifier is not on the allow-list."""

    def __init__(self, model: str, allowed: tuple[str, ...]) -> None:
        super().__init__(f"Invalid model: {model}. Allowed: {', '.join(allowed)}")
        self.model = model
        self.allowed = allowed


class NoImagesProvidedError(GeminiImageError, ValueError):
    """An operation that needs input images received none."""

    def __init__(self) -> None:
        super().__init__("At least one image is required")


class TransportError(GeminiImageError):
    """Gemini answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Gemini API error ({status_code}): {body}", status_code=status_code)
        self.body = body


class ConnectionFailedError(GeminiImageError):
    """No HTTP response was received from Gemini."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"Gemini request failed ({type(error).__name__}): {error}")


class ProviderError(GeminiImageError):
    """Gemini returned an error object in a successful response."""

    def __init__(
        self, message: str, code: int | None = None, status: str | None = None
    ) -> None:
        super().__init__(f"Gemini API error: {message}")
        self.provider_message = message
        self.code = code
        self.status = status


class InvalidResponseError(GeminiImageError):
    """Response body is not a JSON object."""

    def __init__(self, status_code: int) -> None:
        super().__init__("Invalid JSON in Gemini response", status_code=status_code)


class EmptyResponseError(GeminiImageError):
    """Image generation returned no candidates."""

    def __init__(self) -> None:
        super().__init__("No image generated - empty response from Gemini")


class NoResponseError(GeminiImageError):
    """Image description returned no candidates."""

    def __init__(self) -> None:
        super().__init__("No response from Gemini")


class NoImageDataError(GeminiImageError):
    """Candidate carried no inline image part."""

    def __init__(self) -> None:
        super().__init__("No image data in Gemini response")


class NoDescriptionError(GeminiImageError):
    """Candidate carried no text for a description."""

    def __init__(self) -> None:
        super().__init__("No description in Gemini response")
