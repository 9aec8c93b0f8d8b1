"""Configuration management for LinMatch."""

from __future__ import annotations

import json
from argparse import ArgumentParser
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, ValidationError, model_validator

from linmatch.core.types import Algorithm
from linmatch.utils.helpers import expand_file_path


class Config(BaseModel):
    """Configuration for a search run."""

    pattern: str | None = Field(None, description="Pattern to search for")
    text: str | None = Field(None, description="Inline text to scan")
    text_file: str | None = Field(None, description="UTF-8 file to scan")
    algorithm: Literal["kmp", "z", "both"] = Field("kmp", description="Scanner to use")
    lines: bool = Field(False, description="Scan each line of the text separately")
    show_array: bool = Field(False, description="Print the raw match arrays")
    output: str | None = Field(None, description="Path of the JSON report")
    log_file: str | None = None
    demo: bool = False
    verbose: bool = False
    debug: bool = False

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Validate cross-field constraints."""
        if self.text is not None and self.text_file:
            raise ValueError("text and text_file are mutually exclusive")
        return self

    @property
    def algorithms(self) -> list[Algorithm]:
        """Algorithms selected by the ``algorithm`` field."""
        if self.algorithm == "both":
            return [Algorithm.KMP, Algorithm.Z]
        return [Algorithm(self.algorithm)]


def load_config(json_path: str | None, cli_args, parser: ArgumentParser) -> Config:
    """Load JSON config, override with CLI args, return Config object."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > JSON > Fallback."""
        cli_value = getattr(cli_args, key)
        default_value = parser.get_default(key)
        # Use CLI value only if it was explicitly set by the user
        if cli_value != default_value:
            return cli_value
        return json_config.get(key, fallback)

    json_config = {}
    if json_path:
        json_path = expand_file_path(json_path) or json_path
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                json_config = json.load(f)
        except FileNotFoundError:
            logger.error(f"✗ Config file not found: {json_path}")
            logger.error("  Please check the file path and try again")
            raise
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {json_path}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e
        except PermissionError:
            logger.error(f"✗ Permission denied reading config file: {json_path}")
            logger.error("  Please check file permissions and try again")
            raise
        except UnicodeDecodeError as e:
            logger.error(f"✗ Encoding error reading config file {json_path}: {e}")
            logger.error("  Please ensure the file is UTF-8 encoded")
            raise

    config_dict = {
        "pattern": get_value("pattern", None),
        "text": get_value("text", None),
        "text_file": get_value("text_file", None),
        "algorithm": get_value("algorithm", "kmp"),
        "lines": cli_args.lines or json_config.get("lines", False),
        "show_array": cli_args.show_array or json_config.get("show_array", False),
        "output": get_value("output", None),
        "log_file": get_value("log_file", None),
        "demo": cli_args.demo or json_config.get("demo", False),
        "verbose": cli_args.verbose or json_config.get("verbose", False),
        "debug": cli_args.debug or json_config.get("debug", False),
    }

    try:
        return Config.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
