"""Connectors: adapters de borda para APIs externas.

Estrutura:
- onesignal/: REST API do OneSignal (gateway HTTP, envelope, erros)
"""

__all__: list[str] = []
