"""
Account vocabulary: the single definition of valid statuses and tags.

The built-in sets can be replaced from a YAML file:

```yaml
default_status: New
statuses:
  - New
  - Working
tags:
  - AUTOSAR
  - BSW
```
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, model_validator

DEFAULT_STATUS = "New"

DEFAULT_STATUSES: tuple[str, ...] = (
    "New",
    "Working",
    "Warm",
    "Hot",
    "Nurture",
    "Closed-Won",
    "Closed-Lost",
)

DEFAULT_TAGS: tuple[str, ...] = (
    "AUTOSAR",
    "Adaptive AUTOSAR",
    "Embedded Systems",
    "BSW",
    "ECU",
    "Zone Controller",
    "HCP",
    "CI/CD",
    "V&V Testing",
    "Integration",
    "Software Architecture",
    "LINUX",
    "QNX",
    "Cybersecurity",
    "FuSa",
    "OTA",
    "Diagnostics",
    "Vehicle Network",
    "Vehicle Architecture",
    "Connected Car",
    "Platform",
    "µC/HW",
)


class AccountVocabulary(BaseModel):
    """
    Enumerated values accepted for account status and tags.

    Attributes:
        statuses: Accepted status values (case-sensitive)
        tags: Accepted tag values (case-sensitive)
        default_status: Status assigned when a row's status is missing or unknown
    """

    statuses: tuple[str, ...] = Field(default=DEFAULT_STATUSES, min_length=1)
    tags: tuple[str, ...] = DEFAULT_TAGS
    default_status: str = DEFAULT_STATUS

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_default_status(self) -> "AccountVocabulary":
        """The default status must itself be a valid status."""
        if self.default_status not in self.statuses:
            raise ValueError(
                f"default_status '{self.default_status}' is not one of the configured statuses"
            )
        return self

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "AccountVocabulary":
        """
        Load a vocabulary from a YAML file.

        Keys left out of the file keep their built-in values.

        Args:
            config_path: Path to the YAML file

        Returns:
            AccountVocabulary instance

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a mapping or a list is malformed
        """
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Vocabulary file not found: {config_path}")

        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError("Vocabulary file must contain a mapping")

        values: dict[str, Any] = {}
        for key in ("statuses", "tags"):
            if key in config:
                if not isinstance(config[key], list):
                    raise ValueError(f"'{key}' must be a list")
                values[key] = tuple(str(item) for item in config[key])
        if "default_status" in config:
            values["default_status"] = str(config["default_status"])

        return cls(**values)


DEFAULT_VOCABULARY = AccountVocabulary()
