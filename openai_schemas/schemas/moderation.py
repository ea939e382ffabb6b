"""
Pydantic Schemas for Moderation Reports

This module defines the response model of the moderation endpoint:
- ModerationCategory: The fixed 11-member category taxonomy and its wire keys
- CategorySet[T]: One value per category, shared by flags and scores
- ModerationResult: Verdict, flags and scores for a single input
- ModerationReport: Request ID, model and one result per input

Several wire keys ("hate/threatening", "self-harm/intent", ...) are not
valid Python identifiers. Every field of CategorySet is bound to its wire
key through an explicit alias taken from ModerationCategory.

Decoding is strict and all-or-nothing: a missing field or a value of the
wrong primitive type raises SchemaMismatch.
"""

import logging
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictStr,
    ValidationError,
    field_validator,
)

from openai_schemas.errors import SchemaMismatch

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# ENUMERATIONS
# =============================================================================


class ModerationCategory(str, Enum):
    """
    Moderation categories. Each value is the exact wire key.

    HATE: Hate based on race, gender, ethnicity, religion, nationality,
        sexual orientation, disability status, or caste
    HATE_THREATENING: Hateful content that also includes violence or
        serious harm towards the targeted group
    HARASSMENT: Harassing language towards any target
    HARASSMENT_THREATENING: Harassment that also includes violence or
        serious harm towards any target
    SELF_HARM: Content that promotes, encourages, or depicts self-harm
    SELF_HARM_INTENT: Speaker is engaging or intends to engage in self-harm
    SELF_HARM_INSTRUCTIONS: Instructions or advice on committing self-harm
    SEXUAL: Content meant to arouse sexual excitement
    SEXUAL_MINORS: Sexual content that includes an individual under 18
    VIOLENCE: Content that depicts death, violence, or physical injury
    VIOLENCE_GRAPHIC: Death, violence, or physical injury in graphic detail
    """

    HATE = "hate"
    HATE_THREATENING = "hate/threatening"
    HARASSMENT = "harassment"
    HARASSMENT_THREATENING = "harassment/threatening"
    SELF_HARM = "self-harm"
    SELF_HARM_INTENT = "self-harm/intent"
    SELF_HARM_INSTRUCTIONS = "self-harm/instructions"
    SEXUAL = "sexual"
    SEXUAL_MINORS = "sexual/minors"
    VIOLENCE = "violence"
    VIOLENCE_GRAPHIC = "violence/graphic"


# Field name on CategorySet for each category, in wire order
CATEGORY_FIELDS: dict[ModerationCategory, str] = {
    ModerationCategory.HATE: "hate",
    ModerationCategory.HATE_THREATENING: "hate_threatening",
    ModerationCategory.HARASSMENT: "harassment",
    ModerationCategory.HARASSMENT_THREATENING: "harassment_threatening",
    ModerationCategory.SELF_HARM: "self_harm",
    ModerationCategory.SELF_HARM_INTENT: "self_harm_intent",
    ModerationCategory.SELF_HARM_INSTRUCTIONS: "self_harm_instructions",
    ModerationCategory.SEXUAL: "sexual",
    ModerationCategory.SEXUAL_MINORS: "sexual_minors",
    ModerationCategory.VIOLENCE: "violence",
    ModerationCategory.VIOLENCE_GRAPHIC: "violence_graphic",
}


# =============================================================================
# RESPONSE MODELS
# =============================================================================


class CategorySet(BaseModel, Generic[T]):
    """
    One value per moderation category.

    Parameterized on the value type so the flag set (CategorySet[StrictBool])
    and the score set (CategorySet[StrictFloat]) share one field list and
    one alias table.
    """

    hate: T = Field(..., alias=ModerationCategory.HATE.value)
    hate_threatening: T = Field(..., alias=ModerationCategory.HATE_THREATENING.value)
    harassment: T = Field(..., alias=ModerationCategory.HARASSMENT.value)
    harassment_threatening: T = Field(
        ..., alias=ModerationCategory.HARASSMENT_THREATENING.value
    )
    self_harm: T = Field(..., alias=ModerationCategory.SELF_HARM.value)
    self_harm_intent: T = Field(..., alias=ModerationCategory.SELF_HARM_INTENT.value)
    self_harm_instructions: T = Field(
        ..., alias=ModerationCategory.SELF_HARM_INSTRUCTIONS.value
    )
    sexual: T = Field(..., alias=ModerationCategory.SEXUAL.value)
    sexual_minors: T = Field(..., alias=ModerationCategory.SEXUAL_MINORS.value)
    violence: T = Field(..., alias=ModerationCategory.VIOLENCE.value)
    violence_graphic: T = Field(..., alias=ModerationCategory.VIOLENCE_GRAPHIC.value)

    # Newer categories the service may add are ignored
    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def from_field_values(cls, **values: T) -> "CategorySet[T]":
        """
        Build a CategorySet from Python field names (self_harm_intent=...).

        Payloads are only ever validated by wire key; this is for
        constructing values in code.
        """
        by_wire_key = {
            category.value: values[field_name]
            for category, field_name in CATEGORY_FIELDS.items()
            if field_name in values
        }
        return cls.model_validate(by_wire_key)

    def get(self, category: ModerationCategory) -> T:
        """Return the value recorded for a category."""
        return getattr(self, CATEGORY_FIELDS[ModerationCategory(category)])

    def items(self) -> Iterator[tuple[ModerationCategory, T]]:
        """Iterate (category, value) pairs in wire order."""
        for category, field_name in CATEGORY_FIELDS.items():
            yield category, getattr(self, field_name)


class ModerationResult(BaseModel):
    """
    Moderation outcome for a single input.

    categories and category_scores describe the same 11 categories:
    categories.get(c) and category_scores.get(c) always refer to c.
    """

    flagged: StrictBool = Field(
        ...,
        description="Whether the content violates the usage policies",
    )

    categories: CategorySet[StrictBool] = Field(
        ...,
        description="Per-category flags",
    )

    category_scores: CategorySet[StrictFloat] = Field(
        ...,
        description="Per-category scores as predicted by the model",
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def flagged_categories(self) -> list[ModerationCategory]:
        """Categories whose flag is set, in wire order."""
        return [category for category, flag in self.categories.items() if flag]

    @property
    def top_category(self) -> ModerationCategory:
        """Category with the highest score; the first in wire order on ties."""
        category, _ = max(self.category_scores.items(), key=lambda pair: pair[1])
        return category


class ModerationReport(BaseModel):
    """
    Response from the moderation endpoint.

    Example:
        {
            "id": "modr-XXXXX",
            "model": "text-moderation-007",
            "results": [
                {
                    "flagged": true,
                    "categories": {"hate": false, "hate/threatening": false, ...},
                    "category_scores": {"hate": 0.0002, "hate/threatening": 0.0, ...}
                }
            ]
        }
    """

    id: StrictStr = Field(
        ...,
        description="Unique identifier for the moderation request",
    )

    model: StrictStr = Field(
        ...,
        description="Model used to generate the moderation results",
    )

    results: list[ModerationResult] = Field(
        ...,
        description="One result per moderated input, in input order",
    )

    @field_validator("results", mode="before")
    @classmethod
    def validate_results_is_list(cls, v):
        """Reject tuples and other sequences pydantic would coerce to a list."""
        if not isinstance(v, list):
            raise ValueError("results must be a list")
        return v

    model_config = ConfigDict(frozen=True, extra="ignore")

    @property
    def is_flagged(self) -> bool:
        """True if any result is flagged; False for an empty report."""
        return any(result.flagged for result in self.results)

    @property
    def flagged_results(self) -> list[ModerationResult]:
        """Results whose flagged verdict is set, in input order."""
        return [result for result in self.results if result.flagged]

    def to_payload(self) -> dict:
        """Convert back to the wire dictionary, using wire keys."""
        return self.model_dump(mode="json", by_alias=True)


# =============================================================================
# DECODING
# =============================================================================


def decode_moderation_report(
    payload: str | bytes | Mapping,
) -> ModerationReport:
    """
    Decode a moderation endpoint response.

    Args:
        payload: Raw JSON text/bytes, or an already-parsed JSON object

    Returns:
        The decoded ModerationReport

    Raises:
        SchemaMismatch: If the payload is not valid JSON, a required field
            is missing, or a value has the wrong type
    """
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            report = ModerationReport.model_validate_json(payload)
        else:
            report = ModerationReport.model_validate(payload)
    except ValidationError as exc:
        error = SchemaMismatch.from_validation_error("ModerationReport", exc)
        logger.warning(
            f"{error.message}: "
            + ", ".join(detail.field or "<root>" for detail in error.details)
        )
        raise error from exc

    logger.debug(
        f"Decoded moderation report {report.id} with {len(report.results)} results"
    )
    return report
