"""
Load prompt templates from the bundled prompts.yaml file.

Prompts are defined in src/logogen/prompts.yaml and loaded once per process.
"""

import importlib.resources
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from logogen.utils.exceptions import ConfigurationError

# Module-level cache for parsed prompts
_prompts_data: dict[str, Any] | None = None


class PromptTemplate(BaseModel):
    """Schema for a single prompt template entry."""

    template: str = Field(..., min_length=1, description="Template string with placeholders")


class PromptsSchema(BaseModel):
    """Schema for prompts.yaml configuration file."""

    model_config = {"extra": "allow"}

    generation: PromptTemplate
    refinement: PromptTemplate


def _load_prompts() -> dict[str, Any]:
    """Load and parse prompts.yaml from the package. Cached after first call.

    Raises:
        ConfigurationError: If YAML is missing, malformed, or fails validation.
    """
    global _prompts_data
    if _prompts_data is not None:
        return _prompts_data

    try:
        with (
            importlib.resources.files("logogen").joinpath("prompts.yaml").open(encoding="utf-8") as f
        ):
            raw = f.read()
    except FileNotFoundError as e:
        raise ConfigurationError(
            "prompts.yaml not found. This file is required and should be bundled with the package."
        ) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse prompts.yaml: {e}. Check YAML syntax and formatting."
        ) from e

    if data is None:
        raise ConfigurationError(
            "prompts.yaml is empty. Expected 'generation' and 'refinement' sections."
        )

    try:
        PromptsSchema(**data)
    except ValidationError as e:
        errors = "\n".join([f"  - {err['loc'][0]}: {err['msg']}" for err in e.errors()])
        raise ConfigurationError(
            f"Invalid prompts.yaml structure:\n{errors}\n"
            "Expected 'generation' and 'refinement' sections, each with a 'template' key."
        ) from e

    _prompts_data = data
    return _prompts_data


def get_prompt(key: str, subkey: str | None = None) -> str | None:
    """
    Get a prompt string from prompts.yaml.

    Args:
        key: Top-level key (e.g. "generation").
        subkey: Optional subkey (e.g. "template") for nested value.

    Returns:
        The prompt string, or None if not found.
    """
    data = _load_prompts()
    value = data.get(key)
    if value is None:
        return None
    if subkey is not None:
        value = value.get(subkey) if isinstance(value, dict) else None
    return value if isinstance(value, str) else None


def _get_template(key: str, placeholder: str) -> str:
    template = get_prompt(key, "template")
    if not template:
        raise ConfigurationError(f"{key}.template not found in prompts.yaml. This key is required.")
    if placeholder not in template:
        raise ConfigurationError(f"{key}.template must contain {placeholder} placeholder.")
    return template


def get_generation_template() -> str:
    """
    Return the logo generation template (must contain {description}).

    Raises:
        ConfigurationError: If template is missing or invalid.
    """
    return _get_template("generation", "{description}")


def get_refinement_template() -> str:
    """
    Return the logo refinement template (must contain {feedback}).

    Raises:
        ConfigurationError: If template is missing or invalid.
    """
    return _get_template("refinement", "{feedback}")
