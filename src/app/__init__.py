"""App: coração do sistema (despacho, handlers e infraestrutura).

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: fluxo do webhook (autenticação → classificação → handler)
- handlers/: implementações de EventHandlerProtocol
- domain/: eventos e credenciais
- infra/: implementações concretas (CredentialStore em memória)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
