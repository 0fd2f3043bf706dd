"""API: camada de borda do gateway Slack.

Responsabilidades:
- Receber webhooks do Slack
- Validar assinaturas e janela de replay
- Normalizar envelopes para eventos de domínio
- Construir payloads para a Web API
- Expor rotas HTTP (webhook, OAuth, health)

Subpastas:
- connectors/: adapters HTTP por canal
- normalizers/: conversão de payloads externos → eventos de domínio
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (webhooks, OAuth, health)

NÃO PODE conter: regras de despacho, store de credenciais, handlers de aplicação.
"""
