"""
Pipeline Phase Functions.

Runs the orders of a ``Config`` against stores resolved from the registry.
Each order is fire-and-forget: the phase does not know, and does not try to
learn, whether a given material produced a product.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from ..core import LOGGER_NAME, LogStyle
from ..stores import get_store

if TYPE_CHECKING:  # pragma: no cover
    from ..core.config import Config

logger = logging.getLogger(LOGGER_NAME)


class OrderPhaseResult(NamedTuple):
    """Structured return type for :func:`run_order_phase`."""

    orders_placed: int
    stores_visited: tuple[str, ...]


def run_order_phase(
    cfg: Config,
    logger_instance: logging.Logger | None = None,
) -> OrderPhaseResult:
    """
    Place every configured order, in sequence.

    A fresh store is built per order, so no state can leak between orders.

    Args:
        cfg: Validated configuration holding the order list.
        logger_instance: Logger to report to (defaults to the module logger).

    Returns:
        OrderPhaseResult with the number of orders placed and the store
        names visited, in order.

    Example:
        >>> result = run_order_phase(Config())
        >>> result.stores_visited
        ('chair', 'table')
    """
    log = logger_instance or logger

    LogStyle.log_phase_header(log, "FURNITURE ORDERS")

    visited: list[str] = []
    for order in cfg.orders:
        store = get_store(order.store)
        log.debug(f"{LogStyle.INDENT}{LogStyle.ARROW} {store.name:<8}: {order.material!r}")
        store.order_furniture(order.material)
        visited.append(store.name)

    log.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Orders placed: {len(visited)}")
    return OrderPhaseResult(orders_placed=len(visited), stores_visited=tuple(visited))
