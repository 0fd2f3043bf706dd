"""Blocos Block Kit suportados nas mensagens enviadas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

# Limite do Slack para texto de section block
SECTION_TEXT_MAX_CHARS = 3000


@dataclass(frozen=True, slots=True)
class SectionBlock:
    """Section com texto plano."""

    text: str

    def to_dict(self) -> dict[str, Any]:
        if not self.text:
            raise ValueError("section block requer texto")
        if len(self.text) > SECTION_TEXT_MAX_CHARS:
            raise ValueError(f"section block excede {SECTION_TEXT_MAX_CHARS} caracteres")
        return {
            "type": "section",
            "text": {"type": "plain_text", "text": self.text},
        }


@dataclass(frozen=True, slots=True)
class DividerBlock:
    """Linha divisória."""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "divider"}


Block = SectionBlock | DividerBlock


def build_blocks(blocks: Iterable[Block]) -> list[dict[str, Any]]:
    """Serializa blocos na ordem recebida."""
    return [block.to_dict() for block in blocks]
