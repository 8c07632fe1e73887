"""
Prompt building for logogen.

Builders are pure: the same input always yields the same string, and user
text is embedded verbatim (quotes, newlines and braces included).
Validation helpers are for callers; the client never re-validates.
"""

from logogen.core.prompts_loader import get_generation_template, get_refinement_template
from logogen.utils.exceptions import ValidationError

# Loaded from prompts.yaml once per process
GENERATION_TEMPLATE = get_generation_template()
REFINEMENT_TEMPLATE = get_refinement_template()


def build_generation_prompt(description: str) -> str:
    """Return the logo generation prompt for a business description."""
    return GENERATION_TEMPLATE.format(description=description)


def build_refinement_prompt(feedback: str) -> str:
    """Return the refinement instruction that accompanies the prior image."""
    return REFINEMENT_TEMPLATE.format(feedback=feedback)


def _validate_text(value: str, field: str, message: str) -> None:
    if not value or not value.strip():
        raise ValidationError(message, field=field)


def validate_description(description: str) -> None:
    """
    Validate a business description before calling generate.

    Raises:
        ValidationError: If description is empty or whitespace only
    """
    _validate_text(
        description,
        "description",
        "Please enter a description of the business to generate a logo for.",
    )


def validate_feedback(feedback: str) -> None:
    """
    Validate refinement feedback before calling refine.

    Raises:
        ValidationError: If feedback is empty or whitespace only
    """
    _validate_text(feedback, "feedback", "Please enter feedback to refine the logo with.")
