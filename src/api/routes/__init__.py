"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, OAuth, health)
- Leitura do request (corpo bruto, headers, query params)
- Delegação para o dispatcher e o CredentialStore
- Respostas HTTP apropriadas

Estrutura:
- routes/slack/: webhook e OAuth
- routes/health/: liveness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
