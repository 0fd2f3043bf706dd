"""Builders Slack: payloads chat.* e blocos Block Kit."""

from .blocks import Block, DividerBlock, SectionBlock, build_blocks
from .message import (
    build_blocks_payload,
    build_delete_payload,
    build_text_payload,
    build_update_payload,
)

__all__ = [
    "Block",
    "DividerBlock",
    "SectionBlock",
    "build_blocks",
    "build_blocks_payload",
    "build_delete_payload",
    "build_text_payload",
    "build_update_payload",
]
