"""Métricas do conector registradas como logs estruturados.

Agregáveis depois por qualquer backend de logs (BigQuery, CloudWatch, etc.).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
    outcome: str = "success",
) -> None:
    """Registra latência de uma chamada.

    Args:
        component: Nome do componente (ex: "onesignal_gateway")
        operation: Nome da operação (ex: "POST /notifications")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
        outcome: "success" ou a classe de erro resultante
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "outcome": outcome,
            "correlation_id": correlation_id,
        },
    )
