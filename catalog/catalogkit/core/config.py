import argparse
import os
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

BASEDIR_ENV = "CATALOG_BASEDIR"


def _default_basedir() -> Path:
    return Path(os.environ.get(BASEDIR_ENV) or ".")


class CatalogConfig(BaseModel):
    """
    Directory layout of one catalog build.

    Every directory left unset is derived from `basedir`; relative overrides
    are resolved against `basedir` as well.
    """
    basedir: Path = Field(default_factory=_default_basedir)
    resdir: Optional[Path] = None
    srcdir: Optional[Path] = None
    outdir: Optional[Path] = None
    depdir: Optional[Path] = None
    namespace: str = "org/wildfly"
    properties_subdir: str = "org/wildfly/camel/catalog"
    strip_components: int = Field(default=2, ge=0)
    descriptor_extension: str = ".json"

    @field_validator("descriptor_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"descriptor_extension must look like '.json', got {value!r}")
        return value

    @model_validator(mode="after")
    def _derive_dirs(self) -> "CatalogConfig":
        defaults = {
            "resdir": Path("src/main/resources"),
            "srcdir": Path("target/camel-catalog"),
            "outdir": Path("target/classes"),
            "depdir": Path("target/dependency"),
        }
        for name, default in defaults.items():
            value = getattr(self, name) or default
            if not value.is_absolute():
                value = self.basedir / value
            setattr(self, name, value)
        return self

    @property
    def namespace_dir(self) -> Path:
        return self.outdir / self.namespace

    @property
    def properties_dir(self) -> Path:
        return self.outdir / self.properties_subdir

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "CatalogConfig":
        payload: Dict[str, Any] = {}
        for name in ("basedir", "resdir", "srcdir", "outdir", "depdir"):
            value = getattr(args, name, None)
            if value:
                payload[name] = Path(value)
        return cls(**payload)
