"""Abstract Factory: each factory builds a matching family of car parts."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Type

from ..core.patterns.exceptions import UnknownVariantError


class Engine(ABC):
    family: str

    @abstractmethod
    def describe(self) -> str: ...


class Interior(ABC):
    family: str

    @abstractmethod
    def describe(self) -> str: ...


class EconomyEngine(Engine):
    family = "economy"

    def describe(self) -> str:
        return "1.2L fuel-efficient engine"


class EconomyInterior(Interior):
    family = "economy"

    def describe(self) -> str:
        return "fabric seats"


class LuxuryEngine(Engine):
    family = "luxury"

    def describe(self) -> str:
        return "3.0L turbocharged V6 engine"


class LuxuryInterior(Interior):
    family = "luxury"

    def describe(self) -> str:
        return "leather seats"


class CarFactory(ABC):
    """Abstract factory for one family of car parts."""

    family: str

    @abstractmethod
    def create_engine(self) -> Engine: ...

    @abstractmethod
    def create_interior(self) -> Interior: ...


class EconomyCarFactory(CarFactory):
    family = "economy"

    def create_engine(self) -> Engine:
        return EconomyEngine()

    def create_interior(self) -> Interior:
        return EconomyInterior()


class LuxuryCarFactory(CarFactory):
    family = "luxury"

    def create_engine(self) -> Engine:
        return LuxuryEngine()

    def create_interior(self) -> Interior:
        return LuxuryInterior()


@dataclass(frozen=True)
class Car:
    family: str
    engine: Engine
    interior: Interior

    def describe(self) -> str:
        return (
            f"Assembled {self.family} car with {self.engine.describe()} "
            f"and {self.interior.describe()}"
        )


FACTORIES: Dict[str, Type[CarFactory]] = {
    cls.family: cls for cls in (EconomyCarFactory, LuxuryCarFactory)
}


def get_car_factory(family: str) -> CarFactory:
    """Return the factory for a car family.

    Raises:
        UnknownVariantError: If the family is not known
    """
    factory_cls = FACTORIES.get(family.strip().lower())
    if factory_cls is None:
        raise UnknownVariantError("car family", family, FACTORIES)
    return factory_cls()


def assemble_car(factory: CarFactory) -> Car:
    """Build a car whose parts all come from one factory."""
    return Car(
        family=factory.family,
        engine=factory.create_engine(),
        interior=factory.create_interior(),
    )


def run_demo() -> List[str]:
    return [assemble_car(get_car_factory(family)).describe() for family in FACTORIES]
