from typing import List, Optional

from langchain_core.prompts import PromptTemplate
from pydantic import BaseModel, Field

LANGUAGE_SECTION = """
CRITICAL: Generate the entire response in the requested language: {language}.
"""

PLAIN_LANGUAGE_GUIDANCE = """
If some information is missing, make reasonable assumptions and clearly state them.
Always keep the answer short, simple, and practical so that farmers can easily understand and apply it.
"""


class AdvicePrompt(BaseModel):
    """Rendered request for the generative model: instruction text plus attached images."""

    text: str
    media: List[str] = Field(
        default_factory=list,
        description="Image data URIs sent alongside the text, in order.",
    )


def render(template: str, **values) -> str:
    return PromptTemplate.from_template(template).format(**values)


def optional_section(template: str, **values) -> str:
    """Renders ``template`` only when every value is present, else returns ''."""
    if any(value is None for value in values.values()):
        return ""
    return render(template, **values)


def language_section(language: Optional[str]) -> str:
    return optional_section(LANGUAGE_SECTION, language=language)


def format_number(value: float) -> str:
    return f"{value:g}"
