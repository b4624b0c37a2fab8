"""Text extraction pipeline outputs."""

from pydantic import BaseModel

FAILED_METHOD = "failed"


class ExtractionAttempt(BaseModel):
    """One strategy invocation: what it produced and whether it was accepted."""
    method_name: str
    text: str | None = None
    succeeded: bool = False


class ExtractionResult(BaseModel):
    """Winning strategy output for one payload.

    `text` is never empty: on total failure it holds the recovery guidance
    message and `recovered_file_path` points at the saved payload.
    """
    text: str
    method: str
    recovered_file_path: str | None = None
    attempts: list[ExtractionAttempt] = []

    @property
    def failed(self) -> bool:
        return self.method == FAILED_METHOD
