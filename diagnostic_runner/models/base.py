"""Base model configuration for configuration structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with standard configuration.

    Configuration is immutable once validated and rejects unknown keys so that
    typos in run configs surface as validation errors.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
