"""Importable classes used as introspection targets across the test suite."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Annotated, Optional


class Clock:
    pass


class Settings:
    def __init__(self, debug: bool = False) -> None:
        self.debug = debug


class Repository:
    def __init__(self, clock: Clock) -> None:
        self.clock = clock


class Mailer:
    def __init__(self, repository: Repository, clock: Clock, retries: int = 3) -> None:
        self.repository = repository
        self.clock = clock
        self.retries = retries


class Dashboard:
    def __init__(self, repository: Repository, mailer: Mailer) -> None:
        self.repository = repository
        self.mailer = mailer


class Counter:
    def __init__(self, start: int) -> None:
        self.start = start


class UntypedService:
    def __init__(self, dependency) -> None:  # noqa: ANN001
        self.dependency = dependency


class ReportService:
    def __init__(self, repository: Repository, counter: Counter) -> None:
        self.repository = repository
        self.counter = counter


class Notifier(ABC):
    @abstractmethod
    def notify(self, message: str) -> None: ...


class NotifierClient:
    def __init__(self, notifier: Notifier) -> None:
        self.notifier = notifier


class NullableDependency:
    def __init__(self, clock: Optional[Clock]) -> None:  # noqa: UP007
        self.clock = clock


class UnionNoneDependency:
    def __init__(self, clock: "Clock | None") -> None:
        self.clock = clock


class AnnotatedDependency:
    def __init__(self, clock: Annotated[Clock, "primary"]) -> None:
        self.clock = clock


class UnionDependency:
    def __init__(self, target: "Clock | Repository") -> None:
        self.target = target


class GenericDependency:
    def __init__(self, clocks: list[Clock]) -> None:
        self.clocks = clocks


class ForwardReferenceService:
    def __init__(self, missing: "MissingType") -> None:  # noqa: F821
        self.missing = missing


class VariadicService:
    def __init__(self, *args: Clock, **kwargs: Clock) -> None:
        self.args = args
        self.kwargs = kwargs


class KeywordOnlyService:
    def __init__(self, *, clock: Clock, repository: Repository | None = None) -> None:
        self.clock = clock
        self.repository = repository


class Outer:
    class Inner:
        def __init__(self, clock: Clock) -> None:
            self.clock = clock


@dataclass
class DataclassService:
    repository: Repository
    name: str = "reports"


class CycleA:
    def __init__(self, b: "CycleB") -> None:
        self.b = b


class CycleB:
    def __init__(self, a: CycleA) -> None:
        self.a = a


class SelfReferencing:
    def __init__(self, parent: "SelfReferencing") -> None:
        self.parent = parent


class PagedRepository:
    def __init__(self, repository: Repository, page_size: int) -> None:
        self.repository = repository
        self.page_size = page_size


@dataclass
class StaticRegistry:
    """Registry double that knows a fixed set of service names."""

    names: set[str] = field(default_factory=set)
    queried: list[str] = field(default_factory=list)

    def has(self, name: str) -> bool:
        self.queried.append(name)
        return name in self.names
