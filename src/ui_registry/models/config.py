"""
Project configuration with strong typing.
The consumer's resolved components config, as handed over by the config loader.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProjectModel(BaseModel):
    """Pydantic config shared by the project config models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,  # Immutable for the duration of a resolution
    )


class TailwindConfig(ProjectModel):
    """Tailwind section."""

    config: str = Field(default="tailwind.config.js")
    css: str = Field(default="app/globals.css")
    base_color: str | None = Field(default=None)
    css_variables: bool = Field(default=True)
    prefix: str = Field(default="")


class AliasesConfig(ProjectModel):
    """Import aliases."""

    components: str = Field(default="@/components")
    utils: str = Field(default="@/lib/utils")
    ui: str | None = Field(default=None)
    lib: str | None = Field(default=None)
    hooks: str | None = Field(default=None)


class ProjectConfig(ProjectModel):
    """Resolved components config consumed by the resolver and the path mapping."""

    style: str
    tailwind: TailwindConfig = Field(default_factory=TailwindConfig)
    aliases: AliasesConfig = Field(default_factory=AliasesConfig)
    resolved_paths: dict[str, str] = Field(default_factory=dict)

    def with_base_color(self, base_color: str | None) -> "ProjectConfig":
        """Create updated config (immutable pattern)."""
        return self.model_copy(
            update={"tailwind": self.tailwind.model_copy(update={"base_color": base_color})}
        )
