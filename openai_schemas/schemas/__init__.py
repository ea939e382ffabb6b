"""
Schemas module: Pydantic wire models.

This module provides validated data models for two API payloads:
- Tool-output submission request body for paused runs
- Moderation endpoint response with per-category flags and scores

Example usage:
    from openai_schemas.schemas import ToolOutput, ToolOutputSubmission

    submission = ToolOutputSubmission(
        tool_outputs=[ToolOutput(tool_call_id="call_1", output="42")]
    )
    body = encode_tool_outputs(submission)

    from openai_schemas.schemas import decode_moderation_report
    report = decode_moderation_report(response_text)
    if report.is_flagged:
        ...
"""

from openai_schemas.schemas.moderation import (
    # Enums
    ModerationCategory,
    CATEGORY_FIELDS,
    # Response models
    CategorySet,
    ModerationResult,
    ModerationReport,
    # Decoding
    decode_moderation_report,
)
from openai_schemas.schemas.runs import (
    # Request models
    ToolOutput,
    ToolOutputSubmission,
    # Encoding
    encode_tool_outputs,
)

__all__ = [
    # Enums
    "ModerationCategory",
    "CATEGORY_FIELDS",
    # Request models
    "ToolOutput",
    "ToolOutputSubmission",
    # Response models
    "CategorySet",
    "ModerationResult",
    "ModerationReport",
    # Conversion utilities
    "encode_tool_outputs",
    "decode_moderation_report",
]
