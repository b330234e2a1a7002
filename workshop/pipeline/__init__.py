"""
Pipeline Orchestration Module.

Example:
    >>> from workshop.pipeline import run_order_phase
    >>> run_order_phase(cfg)
"""

from .phases import OrderPhaseResult, run_order_phase

__all__ = [
    "OrderPhaseResult",
    "run_order_phase",
]
