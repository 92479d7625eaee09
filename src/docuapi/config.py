"""Optional configuration file.

A YAML or JSON file of the form::

    input: openapi.yaml          # or a list of files
    output: docs/
    theme: dark
    options:
      logo: logo.svg
      favicon: favicon.ico
      tryItOut: true
      search: true
      toc: true
      title: My API
      codeSamples: [curl]        # accepted, not rendered

Values given on the command line take precedence over the file, which takes
precedence over the built-in defaults. Relative ``input`` and ``output`` paths
are resolved against the directory holding the config file.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from docuapi.exceptions import ConfigError, DocuapiError
from docuapi.parser.detect import detect_format
from docuapi.parser.loader import decode


class ConfigOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    logo: str | None = None
    favicon: str | None = None
    try_it_out: bool | None = Field(default=None, alias="tryItOut")
    search: bool | None = None
    toc: bool | None = None
    title: str | None = None
    code_samples: Any = Field(default=None, alias="codeSamples")


class DocsConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    input: list[str] = []
    output: str | None = None
    theme: str | None = None
    options: ConfigOptions = ConfigOptions()

    @field_validator("input", mode="before")
    @classmethod
    def _single_input(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value or []

    def input_paths(self, base_dir: Path) -> list[Path]:
        return [base_dir / p for p in self.input]

    def output_path(self, base_dir: Path) -> Path | None:
        return base_dir / self.output if self.output else None


def load_config(config_path: Path) -> DocsConfig:
    """Load and validate a configuration file.

    Raises:
        ConfigError: If the file is missing, unreadable, or has unknown or
            wrongly typed keys.
    """
    config_path = Path(config_path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config file {config_path}: {exc}") from exc

    try:
        data = decode(text, detect_format(config_path), source=str(config_path))
    except DocuapiError as exc:
        raise ConfigError(str(exc)) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: config must be a mapping")

    try:
        return DocsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {config_path}:\n{exc}") from exc
