"""Pattern demonstrations.

Each demo module exposes ``run_demo()`` returning the lines it prints.
"""

from typing import Callable, Dict, List

from . import cars, notifications, payments, shapes, singletons

DEMOS: Dict[str, Callable[[], List[str]]] = {
    "singleton": singletons.run_demo,
    "simple-factory": shapes.run_demo,
    "factory-method": notifications.run_demo,
    "abstract-factory": cars.run_demo,
    "strategy": payments.run_demo,
}

__all__ = ["DEMOS"]
