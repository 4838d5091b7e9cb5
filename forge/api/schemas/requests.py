"""
Request envelopes for the prediction endpoints.

These models describe the wire shape of inbound requests. They perform
STRUCTURAL validation only (field presence and JSON types). Whether a text is
meaningful, or whether a batch may be empty, is decided by the inference
engine, not here.
"""

from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class EnvelopeModel(BaseModel):
    """Base class for immutable wire envelopes.

    Optional fields listed in `omit_when_absent` are left out of the
    serialized output when they hold no value, so absent fields never travel
    as `null`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", protected_namespaces=())

    omit_when_absent: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def _drop_absent_fields(self, handler):
        data = handler(self)
        for name in self.omit_when_absent:
            if name in data and data[name] is None:
                del data[name]
        return data


class PredictRequest(EnvelopeModel):
    """A single-text prediction request.

    Example:
        ```json
        {"text": "I absolutely love this product!", "model": "distilbert-base-uncased-finetuned-sst-2-english"}
        ```
    """

    omit_when_absent = ("model",)

    text: str = Field(
        ...,
        description="Text to run inference on.",
        examples=["I love this product! It's amazing."],
    )
    model: Optional[str] = Field(
        default=None,
        description="Model to use. Omit to use the active model.",
        examples=["distilbert-base-uncased-finetuned-sst-2-english"],
    )


class BatchPredictRequest(EnvelopeModel):
    """A batch prediction request.

    Results are returned in the same order as `texts`.

    Example:
        ```json
        {"texts": ["I love this product!", "This is terrible."]}
        ```
    """

    omit_when_absent = ("model",)

    texts: List[str] = Field(
        ...,
        description="Texts to run inference on, in order.",
        examples=[["I love this product!", "This is terrible."]],
    )
    model: Optional[str] = Field(
        default=None,
        description="Model to use. Omit to use the active model.",
    )
