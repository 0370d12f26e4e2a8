"""Classes whose annotations are deferred strings, with some names left undefined."""

from __future__ import annotations

from tests.sample_services import Clock, Repository


class PartlyMissing:
    def __init__(self, clock: Clock, other: MissingType, size: int | None) -> None:  # noqa: F821
        self.clock = clock
        self.other = other
        self.size = size


class PartlyTyped:
    def __init__(self, repository: Repository, other: MissingType) -> None:  # noqa: F821
        self.repository = repository
        self.other = other


class UnevaluableWrappers:
    def __init__(
        self,
        optional_builtin: Optional[int],  # noqa: F821, UP007
        optional_missing: Optional[MissingType],  # noqa: F821, UP007
        annotated_missing: Annotated[MissingType, "marker"],  # noqa: F821
        nullable_missing: MissingType | None,  # noqa: F821
        generic_missing: list[MissingType],  # noqa: F821
        union_missing: MissingType | OtherMissing,  # noqa: F821
    ) -> None:
        self.values = (
            optional_builtin,
            optional_missing,
            annotated_missing,
            nullable_missing,
            generic_missing,
            union_missing,
        )
