"""API: camada de borda com a REST API do OneSignal.

Responsabilidades:
- Transporte HTTP autenticado (único ponto de IO de rede)
- Construir payloads e query strings
- Aplicar validações de input antes de qualquer chamada

Subpastas:
- connectors/: gateway HTTP, envelope de requisição e erros do upstream
- payload_builders/: construção de payloads e queries
- validators/: validação de inputs do chamador

NÃO PODE conter: orquestração de serviços nem wiring.
"""
