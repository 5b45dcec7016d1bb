from typing import Protocol


class SynthesisClient(Protocol):
    """Interface for the external generative-text service."""

    async def synthesize(self, prompt: str) -> str:
        """Send the prompt and return the model's raw text output.

        Raises:
            SynthesisFailure: If the service is unreachable, times out, or
                answers with a non-success status.
        """
        ...
