"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- slack/: Web API do Slack (chat.*, Block Kit)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
