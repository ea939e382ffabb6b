"""
Pydantic Schemas for Run Tool Outputs

When a run pauses with status "requires_action" and a required action of
type "submit_tool_outputs", the caller executes the requested tool calls and
submits all of their outputs in a single request. This module defines that
request body:
- ToolOutput: One (tool_call_id, output) pair
- ToolOutputSubmission: The ordered list of outputs for a run

Wire format:
    {"tool_outputs": [{"tool_call_id": "call_1", "output": "42"}]}
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from openai_schemas.config import get_settings

logger = logging.getLogger(__name__)


class ToolOutput(BaseModel):
    """
    Output of a single tool call.

    Both fields are optional on the wire. An entry with neither set is
    accepted and encoded as-is.
    """

    tool_call_id: str | None = Field(
        default=None,
        description="ID of the tool call in the run's required_action the output is for",
    )

    output: str | None = Field(
        default=None,
        description="Output of the tool call, submitted to continue the run",
    )

    model_config = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        """True when neither the call ID nor the output is set."""
        return self.tool_call_id is None and self.output is None


class ToolOutputSubmission(BaseModel):
    """
    Request body for submitting tool outputs to a run.

    Order of tool_outputs is preserved on the wire.

    Example:
        {
            "tool_outputs": [
                {"tool_call_id": "call_abc123", "output": "28C and sunny"},
                {"tool_call_id": "call_def456", "output": "42"}
            ]
        }
    """

    tool_outputs: list[ToolOutput] = Field(
        ...,
        description="Outputs of the tool calls being submitted",
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "tool_outputs": [
                        {"tool_call_id": "call_abc123", "output": "28C and sunny"},
                    ]
                }
            ]
        },
    )

    def to_payload(self, omit_null: bool | None = None) -> dict:
        """
        Convert to the wire dictionary.

        Args:
            omit_null: Drop absent optional keys instead of encoding null.
                Defaults to the omit_null_tool_output_fields setting.

        Returns:
            JSON-compatible dictionary with snake_case wire keys
        """
        return self.model_dump(mode="json", exclude_none=self._prepare(omit_null))

    def to_json(self, omit_null: bool | None = None) -> str:
        """Serialize to compact JSON text; see to_payload for omit_null."""
        return self.model_dump_json(exclude_none=self._prepare(omit_null))

    def _prepare(self, omit_null: bool | None) -> bool:
        """Resolve omit_null against settings and log empty entries."""
        if omit_null is None:
            omit_null = get_settings().omit_null_tool_output_fields
        for index, tool_output in enumerate(self.tool_outputs):
            if tool_output.is_empty:
                logger.warning(
                    f"tool_outputs[{index}] has neither tool_call_id nor output"
                )
        return omit_null


def encode_tool_outputs(
    submission: ToolOutputSubmission, omit_null: bool | None = None
) -> str:
    """
    Serialize a ToolOutputSubmission to JSON text.

    Args:
        submission: The submission to encode
        omit_null: Drop absent optional keys instead of encoding null.
            Defaults to the omit_null_tool_output_fields setting.

    Returns:
        Compact JSON string ready to send as the request body
    """
    body = submission.to_json(omit_null)
    logger.debug(f"Encoded {len(submission.tool_outputs)} tool outputs")
    return body
