"""Typed errors raised by the analysis pipeline."""


class PrismError(Exception):
    """Base class for all Prism analysis errors."""


class InvalidInput(PrismError):
    """The requested topic is missing, blank, or not a string."""


class CredentialError(PrismError):
    """An access token could not be obtained from a credential provider."""


class SynthesisFailure(PrismError):
    """The generative-text service was unreachable or returned a non-success status.

    The upstream body is kept for server-side diagnostics only and is never
    part of ``str(error)``.

    Args:
        status_code: Upstream HTTP status, or None for transport errors and timeouts.
        body: Upstream response body or a short transport error description.
    """

    def __init__(self, status_code: int | None, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = "Synthesis request failed before a response was received"
        else:
            message = f"Synthesis request failed with status {status_code}"
        super().__init__(message)


class MalformedResponse(PrismError):
    """The generative-text service returned text that is not a JSON object.

    Args:
        raw_text: The unparseable model output, kept for diagnostics.
    """

    def __init__(self, raw_text: str) -> None:
        self.raw_text = raw_text
        super().__init__("Failed to parse analysis from model response")
