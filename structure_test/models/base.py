"""Base model configuration for all settings records."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with standard configuration.

    Records are frozen once built and accept either the Python field name or
    the configuration-file alias.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
