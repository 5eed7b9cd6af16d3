"""Tests for settings records."""

import pytest
from pydantic import ValidationError

from structure_test.models.config import Config, ContainerRunOptions, EnvVar, Label
from structure_test.testing.factories import ContainerRunOptionsFactory


def test_run_options_unset_by_default() -> None:
    """Options with only empty values are not set."""
    assert ContainerRunOptions().is_set() is False


@pytest.mark.parametrize(
    "options",
    [
        ContainerRunOptions(user="root"),
        ContainerRunOptions(privileged=True),
        ContainerRunOptions(tty=True),
        ContainerRunOptions(env_vars=["FOO=bar"]),
        ContainerRunOptions(env_file="/tmp/env"),
        ContainerRunOptions(capabilities=["NET_ADMIN"]),
        ContainerRunOptions(bind_mounts=["/tmp:/data"]),
    ],
)
def test_run_options_set_by_any_field(options: ContainerRunOptions) -> None:
    """Any single non-empty field marks the options as set."""
    assert options.is_set() is True


def test_run_options_from_built_factory() -> None:
    """Options built with a user are set."""
    options = ContainerRunOptionsFactory.build(user="1000")

    assert options.is_set() is True


def test_run_options_accept_config_file_names() -> None:
    """Options load from the camelCase names used in config files."""
    options = ContainerRunOptions.model_validate(
        {
            "allocateTty": True,
            "envVars": ["A=1"],
            "envFile": ".env",
            "bindMounts": ["/src:/dst"],
        }
    )

    assert options.tty is True
    assert options.env_vars == ["A=1"]
    assert options.env_file == ".env"
    assert options.bind_mounts == ["/src:/dst"]


def test_run_options_are_frozen() -> None:
    """Options cannot be changed once built."""
    options = ContainerRunOptions()

    with pytest.raises(ValidationError):
        options.privileged = True  # type: ignore[misc]


def test_env_var_defaults_to_literal_match() -> None:
    """Values are matched literally unless marked as a regex."""
    env_var = EnvVar(key="PATH", value="/usr/bin")

    assert env_var.is_regex is False


def test_label_reads_is_regex_alias() -> None:
    """isRegex from config files sets is_regex."""
    label = Label.model_validate({"key": "maintainer", "value": ".*", "isRegex": True})

    assert label.is_regex is True


@pytest.mark.parametrize("record", [EnvVar, Label])
def test_key_required(record: type[EnvVar] | type[Label]) -> None:
    """A key must be present and non-empty."""
    with pytest.raises(ValidationError):
        record.model_validate({"value": "x"})
    with pytest.raises(ValidationError):
        record(key="")


def test_config_defaults_empty() -> None:
    """Unspecified config fields are empty."""
    config = Config()

    assert config.env == {}
    assert config.entrypoint == []
    assert config.cmd == []
    assert config.volumes == []
    assert config.workdir == ""
    assert config.exposed_ports == []
    assert config.labels == {}
    assert config.user == ""


def test_config_keeps_argument_order() -> None:
    """Entrypoint and command keep their argument order."""
    config = Config(
        entrypoint=["/bin/sh", "-c"],
        cmd=["echo", "hello"],
        exposed_ports=["8080/tcp"],
    )

    assert list(config.entrypoint) == ["/bin/sh", "-c"]
    assert list(config.cmd) == ["echo", "hello"]
    assert list(config.exposed_ports) == ["8080/tcp"]
