"""Tests for the wireconf command line."""

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from wireconf._internal.loader import load_config_file
from wireconf.cli import main
from wireconf.factory import CONFIG_FACTORY

REPOSITORY = "tests.sample_services.Repository"
CLOCK = "tests.sample_services.Clock"


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in ("SERVICE_MANAGER_KEY", "IGNORE_UNRESOLVED", "CONFIG_VARIABLE"):
        monkeypatch.delenv(f"WIRECONF_{variable}", raising=False)


def test_prints_generated_module(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([REPOSITORY])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert output.startswith('"""\nThis file generated by wireconf.dumper.ConfigDumper.\n')
    assert "import tests.sample_services\nimport wireconf.factory\n" in output
    assert f"        {REPOSITORY}: [\n            {CLOCK},\n        ],\n" in output
    assert f"            {REPOSITORY}: wireconf.factory.ConfigFactory,\n" in output


def test_writes_output_file_and_extends_it(tmp_path: Path) -> None:
    output = tmp_path / "config.py"

    assert main([CLOCK, "-o", str(output)]) == 0
    assert main(["tests.sample_services.Mailer", "-c", str(output), "-o", str(output)]) == 0

    config = load_config_file(output)
    assert list(config[CONFIG_FACTORY]) == [
        CLOCK,
        REPOSITORY,
        "tests.sample_services.Mailer",
    ]
    assert set(config["service_manager"]["factories"]) == set(config[CONFIG_FACTORY])


def test_unresolved_parameter_fails(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["tests.sample_services.Counter"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert '"start"' in captured.err


def test_ignore_unresolved_flag(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["tests.sample_services.Counter", "--ignore-unresolved"])

    assert exit_code == 0
    assert "CONFIG = {}\n" in capsys.readouterr().out


def test_service_key_from_environment_and_flag(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("WIRECONF_SERVICE_MANAGER_KEY", "dependencies")

    main([CLOCK])
    assert "    'dependencies': {\n" in capsys.readouterr().out

    main([CLOCK, "--service-key", "service_manager", "--variable", "SETTINGS"])
    output = capsys.readouterr().out
    assert "    'service_manager': {\n" in output
    assert "\nSETTINGS = {\n" in output


def test_unknown_class_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["tests.sample_services.Missing"]) == 1
    assert "cannot be imported" in capsys.readouterr().err


@pytest.fixture()
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    package = tmp_path / "cli_project_app"
    package.mkdir()
    (package / "__init__.py").write_text("", encoding="utf-8")
    (package / "services.py").write_text(
        "class Clock:\n    pass\n\n\n"
        "class Scheduler:\n    def __init__(self, clock: Clock) -> None:\n        self.clock = clock\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(sys, "path", list(sys.path))
    yield tmp_path
    for module_name in [name for name in sys.modules if name.startswith("cli_project_app")]:
        del sys.modules[module_name]


def test_loads_classes_from_the_current_directory(
    project_dir: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.chdir(project_dir)

    exit_code = main(["cli_project_app.services.Scheduler"])

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "import cli_project_app.services\n" in output
    assert "            cli_project_app.services.Clock,\n" in output


def test_loads_classes_from_app_dir(
    project_dir: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    exit_code = main(["cli_project_app.services.Clock", "--app-dir", str(project_dir)])

    assert exit_code == 0
    assert "        cli_project_app.services.Clock: [],\n" in capsys.readouterr().out
