"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- slack/: Slack Events API + Web API

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
