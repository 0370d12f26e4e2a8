"""Tests for the exception hierarchy."""

import pytest

from wireconf.exceptions import (
    ClassNotFoundError,
    CyclicDependencyError,
    InvalidConfigurationError,
    WireconfError,
)


@pytest.mark.parametrize(
    "error_type",
    [InvalidConfigurationError, ClassNotFoundError, CyclicDependencyError],
)
def test_errors_share_the_invalid_configuration_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, InvalidConfigurationError)
    assert issubclass(error_type, WireconfError)


def test_cyclic_dependency_error_reports_path() -> None:
    error = CyclicDependencyError(("app.A", "app.B", "app.A"))

    assert error.path == ("app.A", "app.B", "app.A")
    assert str(error) == "Cyclic dependency detected: app.A -> app.B -> app.A"
