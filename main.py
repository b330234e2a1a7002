"""
Demo Execution Script for the Workshop Furniture Stores.

Builds one chair store and one table store and places a single order with
each: a wooden chair and a plastic table. Nothing is printed at the default
log level; set ``DEBUG=1`` in the environment to watch the orders go through.
"""

from workshop.core import LOGGER_NAME, Logger
from workshop.stores import build_chair_maker, build_table_maker


def main() -> None:
    """Place the two demo orders."""
    Logger.setup(name=LOGGER_NAME)

    chair_store = build_chair_maker()
    chair_store.order_furniture("wood")

    table_store = build_table_maker()
    table_store.order_furniture("plastic")


if __name__ == "__main__":
    main()
