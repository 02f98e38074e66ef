"""Theme file and resolved theme models."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..config import DEFAULT_PADDING_BASE, GENERATOR_VERSION, SCHEMA_VERSION


class SectionConfig(BaseModel):
    """One styled section as written in a theme file.

    Colors stay as literals here; they are parsed during resolution so a bad
    literal surfaces as InvalidColor rather than a validation error.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    selector: str
    background: str
    anchor: str | None = None

    @field_validator("name", "selector")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class ThemeFile(BaseModel):
    """Theme file contents."""

    model_config = ConfigDict(extra="forbid")

    schema_version: int = SCHEMA_VERSION
    padding_base: float = Field(default=DEFAULT_PADDING_BASE, ge=0, allow_inf_nan=False)
    sections: list[SectionConfig]

    @model_validator(mode="after")
    def _unique_names(self) -> "ThemeFile":
        seen: set[str] = set()
        for section in self.sections:
            if section.name in seen:
                raise ValueError(f"duplicate section name: {section.name}")
            seen.add(section.name)
        return self


class ContrastCheck(BaseModel):
    """Contrast of one foreground/background pair."""

    label: str
    foreground: str
    background: str
    ratio: float
    aa_normal: bool
    aa_large: bool


class ResolvedSection(BaseModel):
    """Derived colors and layout for a section, as CSS values."""

    name: str
    selector: str
    background: str
    foreground: str
    border: str
    hover_background: str
    header_text: str
    link: str
    container_padding: str | None
    child_padding: str | None
    checks: list[ContrastCheck]
    warnings: list[str]


class ResolvedTheme(BaseModel):
    """All sections of a theme after resolution."""

    schema_version: int = SCHEMA_VERSION
    generator_version: str = GENERATOR_VERSION
    padding_base: float
    sections: list[ResolvedSection]
    warnings: list[str]


def load_theme(path: Path) -> ThemeFile:
    """Load and validate a JSON theme file.

    Args:
        path: Path to the theme file

    Returns:
        Validated ThemeFile

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the structure is invalid
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return ThemeFile.model_validate(data)


def write_resolved(theme: ResolvedTheme, path: Path) -> Path:
    """Write a resolved theme as stable JSON."""
    payload = theme.model_dump(mode="json")
    path.write_text(
        json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return path
