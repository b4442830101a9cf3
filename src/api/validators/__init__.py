"""Validators: validação de inputs antes de chamadas a APIs externas.

Estrutura:
- onesignal/: notificações, Live Activities, usuários e segmentos
"""

__all__: list[str] = []
