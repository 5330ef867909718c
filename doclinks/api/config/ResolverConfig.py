"""Resolver (rustdoc) configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ResolverConfig(BaseModel):
    """How the external rustdoc resolver is invoked."""

    model_config = ConfigDict(extra="forbid")

    binary: str = Field("rustdoc", description="Resolver binary name or path")
    edition: str = Field("2021", description="Rust edition passed as --edition")
    crate_name: str = Field("a", description="Stub crate name, also the stub file stem")
    extern_crates: list[str] = Field(
        default_factory=lambda: ["alloc", "proc_macro", "test"],
        description="Crates declared extern in the stub so their paths resolve unqualified",
    )

    @field_validator("crate_name")
    @classmethod
    def _validate_crate_name(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"crate_name must be a valid identifier, got {value!r}")
        return value

    @property
    def output_path(self) -> str:
        """Relative path of the HTML rustdoc generates for the stub crate."""
        return f"doc/{self.crate_name}/index.html"
