from __future__ import annotations

from pathlib import Path
from typing import Callable, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

Sex = Literal["male", "female"]

# ---- Check-digit strategies ----
# The official check-digit rule is not public; callers plug in their own.
CheckDigitValidator = Callable[[str, str], bool]   # (base, digit) -> ok?
CheckDigitGenerator = Callable[[str], str]         # base -> digit


# ---- Per-call options ----
class ValidationOptions(BaseModel):
    # None: any numeric check digit is accepted (placeholder policy)
    check_digit_validator: Optional[CheckDigitValidator] = None


class GenerationOptions(BaseModel):
    sex: Optional[Sex] = None                      # random when omitted
    sequence: Optional[int] = None                 # start; random unless within 1..999
    check_digit_generator: Optional[CheckDigitGenerator] = None
    prevent_triple_six: bool = True


# ---- File config (defaults for the CLI) ----
class GenerationDefaults(BaseModel):
    sex: Optional[Sex] = None
    sequence: Optional[int] = Field(default=None, ge=1, le=999)
    seed: Optional[int] = None

    def to_options(self) -> GenerationOptions:
        return GenerationOptions(
            sex=self.sex,
            sequence=self.sequence,
        )


# ---- Root config ----
class SSNKitConfig(BaseModel):
    generation: GenerationDefaults = Field(default_factory=GenerationDefaults)


# ---- Loader ----
def load_config(path: Optional[Path]) -> SSNKitConfig:
    if not path:
        return SSNKitConfig()
    try:
        data = yaml.safe_load(Path(path).read_text()) or {}
        return SSNKitConfig(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigError(f"Could not load config {path}: {e}") from e
