"""Pydantic v2 models for the shell plugin scaffolder.

Every model is frozen: each stage of the generator hands an immutable
snapshot to the next one.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# User answers
# ---------------------------------------------------------------------------

class RawAnswers(BaseModel):
    """The facts collected from the user before any derivation."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Machine-style plugin name, e.g. 'aws'")
    platform_name: str = Field(..., min_length=1, description="Human-readable platform name, e.g. 'AWS'")
    executable: str = Field(default="", description="Executable name, e.g. 'gh'")
    credential_name: str = Field(default="", description="Credential type name, e.g. 'Access Key'")
    example_credential: str = Field(default="", description="Example credential value to analyse")

    @field_validator("name", "platform_name", "executable", "credential_name", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        # A blank answer means the feature is absent. The example credential
        # is kept verbatim so its length is measured as pasted.
        return value.strip() if isinstance(value, str) else value


# ---------------------------------------------------------------------------
# Value composition
# ---------------------------------------------------------------------------

class Charset(BaseModel):
    """Character classes present in a credential value."""
    model_config = ConfigDict(frozen=True)

    uppercase: bool = False
    lowercase: bool = False
    digits: bool = False
    symbols: bool = False


class ValueComposition(BaseModel):
    """Inferred structural shape of an example credential."""
    model_config = ConfigDict(frozen=True)

    length: int = Field(default=0, ge=0)
    charset: Charset = Field(default_factory=Charset)
    prefix: str = Field(default="", description="Detected token prefix, empty if none")


# ---------------------------------------------------------------------------
# Resolved answers
# ---------------------------------------------------------------------------

class ResolvedAnswers(RawAnswers):
    """``RawAnswers`` plus every field derived from them."""

    platform_name_upper_camel_case: str = ""
    credential_name_upper_camel_case: str = ""
    credential_name_snake_case: str = ""
    credential_env_var_name: str = ""
    # Best-effort guess, flagged for review in the generated source.
    field_name: str = ""
    value_composition: Optional[ValueComposition] = None

    def template_context(self) -> dict[str, Any]:
        """Return the mapping that filename and content templates render against."""
        composition = self.value_composition
        return {
            "name": self.name,
            "platform_name": self.platform_name,
            "executable": self.executable,
            "credential_name": self.credential_name,
            "platform_name_upper_camel_case": self.platform_name_upper_camel_case,
            "credential_name_upper_camel_case": self.credential_name_upper_camel_case,
            "credential_name_snake_case": self.credential_name_snake_case,
            "credential_env_var_name": self.credential_env_var_name,
            "field_name": self.field_name,
            "value_composition": None if composition is None else {
                "length": composition.length,
                "prefix": composition.prefix,
                "charset": {
                    "uppercase": composition.charset.uppercase,
                    "lowercase": composition.charset.lowercase,
                    "digits": composition.charset.digits,
                    "symbols": composition.charset.symbols,
                },
            },
        }


# ---------------------------------------------------------------------------
# Templates and their output
# ---------------------------------------------------------------------------

class TemplateDefinition(BaseModel):
    """A filename template paired with a content template."""
    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Stable identifier, e.g. 'credential'")
    filename: str = Field(..., description="Inline Jinja2 template for the output filename")
    template: str = Field(..., description="Content template path relative to the template dir")


class RenderedFile(BaseModel):
    """A rendered output file, ready to be written."""
    model_config = ConfigDict(frozen=True)

    path: PurePosixPath = Field(..., description="Path relative to the plugin directory")
    content: bytes = Field(..., description="UTF-8 encoded file contents")
