"""Package version as either an explicit string or major.minor.patch components."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ComponentVersion(BaseModel):
    """Version derived from three integer components, e.g. ``1.2.3``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["components"] = "components"
    major: int = 0
    minor: int = 0
    patch: int = 0

    def resolve(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class ExplicitVersion(BaseModel):
    """Full version string supplied verbatim, e.g. ``2:1.0~rc1-3``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["explicit"] = "explicit"
    full: str

    def resolve(self) -> str:
        return self.full


Version = Annotated[ExplicitVersion | ComponentVersion, Field(discriminator="kind")]
