"""Models describing an image's runtime configuration and test container overrides."""

from collections.abc import Mapping, Sequence

from pydantic import Field

from structure_test.models.base import Model


class EnvVar(Model):
    """Environment variable expected in an image."""

    key: str = Field(..., min_length=1, description="Variable name")
    value: str = Field(default="", description="Expected value")
    is_regex: bool = Field(
        default=False,
        alias="isRegex",
        description="Match the value as a regular expression",
    )


class Label(Model):
    """Image label expected in an image."""

    key: str = Field(..., min_length=1, description="Label key")
    value: str = Field(default="", description="Expected value")
    is_regex: bool = Field(
        default=False,
        alias="isRegex",
        description="Match both key and value as regular expressions",
    )


class Config(Model):
    """Effective runtime configuration of an image."""

    env: Mapping[str, str] = Field(default_factory=dict)
    entrypoint: Sequence[str] = Field(default_factory=list)
    cmd: Sequence[str] = Field(default_factory=list)
    volumes: Sequence[str] = Field(default_factory=list)
    workdir: str = ""
    exposed_ports: Sequence[str] = Field(
        default_factory=list, description="Ports such as '8080/tcp'"
    )
    labels: Mapping[str, str] = Field(default_factory=dict)
    user: str = ""


class ContainerRunOptions(Model):
    """Overrides applied when starting the test container."""

    user: str = ""
    privileged: bool = False
    tty: bool = Field(default=False, alias="allocateTty")
    env_vars: Sequence[str] = Field(
        default_factory=list, alias="envVars", description="KEY=VALUE pairs"
    )
    env_file: str = Field(default="", alias="envFile")
    capabilities: Sequence[str] = Field(default_factory=list)
    bind_mounts: Sequence[str] = Field(default_factory=list, alias="bindMounts")

    def is_set(self) -> bool:
        """Return True if any option differs from its empty value."""
        return (
            bool(self.user)
            or self.privileged
            or self.tty
            or bool(self.env_file)
            or bool(self.env_vars)
            or bool(self.capabilities)
            or bool(self.bind_mounts)
        )
