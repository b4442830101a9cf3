"""Payload builders: construção de payloads e queries para APIs externas.

Estrutura:
- onesignal/: notificações, audiência e query strings de listagem
"""

__all__: list[str] = []
