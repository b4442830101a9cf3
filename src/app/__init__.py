"""App: serviços de recurso, fachada e infraestrutura de execução.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- services/: serviços de recurso OneSignal (validação + montagem de chamadas)
- domain/: valores de domínio (audiência, agendamento, opções)
- protocols/: contratos/interfaces
- observability/: correlation id e métricas de latência
- constants/: constantes da aplicação

Padrão: app orquestra; api adapta; utils apoia.
"""
