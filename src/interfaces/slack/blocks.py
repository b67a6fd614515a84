# src/interfaces/slack/blocks.py
"""Typed Block Kit elements for Slack surfaces.

Each element is a pydantic model tagged by its Slack "type" field, so a
malformed block (missing label, oversized text, unknown type) fails at
construction instead of at the Slack API call.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter, field_validator

MODAL_TITLE_LIMIT = 24
TEXT_LIMIT = 3000


class PlainText(BaseModel):
    """Plain text composition object."""

    type: Literal["plain_text"] = "plain_text"
    text: str = Field(..., min_length=1, max_length=TEXT_LIMIT)
    emoji: bool = True


class Markdown(BaseModel):
    """mrkdwn text composition object."""

    type: Literal["mrkdwn"] = "mrkdwn"
    text: str = Field(..., min_length=1, max_length=TEXT_LIMIT)


TextObject = Annotated[PlainText | Markdown, Field(discriminator="type")]


class PlainTextInput(BaseModel):
    """Single or multi-line text input element."""

    type: Literal["plain_text_input"] = "plain_text_input"
    action_id: str = Field(..., min_length=1, max_length=255)
    placeholder: PlainText | None = None
    multiline: bool = False


class SectionBlock(BaseModel):
    """Section block displaying a text object."""

    type: Literal["section"] = "section"
    text: TextObject
    block_id: str | None = Field(None, max_length=255)


class InputBlock(BaseModel):
    """Input block collecting one value in a modal."""

    type: Literal["input"] = "input"
    block_id: str = Field(..., min_length=1, max_length=255)
    label: PlainText
    element: PlainTextInput
    optional: bool = False


Block = Annotated[SectionBlock | InputBlock, Field(discriminator="type")]

_blocks_adapter = TypeAdapter(list[Block])


def parse_blocks(payload: list[dict[str, Any]]) -> list[SectionBlock | InputBlock]:
    """Validate raw block dicts into typed blocks.

    Raises:
        pydantic.ValidationError: If any block is malformed.
    """
    return _blocks_adapter.validate_python(payload)


class ModalView(BaseModel):
    """A modal view as passed to views.open."""

    type: Literal["modal"] = "modal"
    title: PlainText
    blocks: list[Block] = Field(..., min_length=1, max_length=100)
    submit: PlainText | None = None
    close: PlainText | None = None
    callback_id: str = Field("", max_length=255)
    private_metadata: str = Field("", max_length=3000)

    @field_validator("title")
    @classmethod
    def _title_fits(cls, value: PlainText) -> PlainText:
        if len(value.text) > MODAL_TITLE_LIMIT:
            raise ValueError(
                f"modal title must be at most {MODAL_TITLE_LIMIT} characters"
            )
        return value

    @property
    def input_blocks(self) -> list[InputBlock]:
        return [b for b in self.blocks if isinstance(b, InputBlock)]

    def to_slack(self) -> dict[str, Any]:
        """Serialize to the JSON structure expected by the Slack API."""
        return self.model_dump(exclude_none=True)
