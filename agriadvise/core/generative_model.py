import logging
from functools import lru_cache
from typing import Any, Optional, Protocol, Type

from langchain_core.exceptions import OutputParserException
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage
from pydantic import BaseModel

from agriadvise.prompts.rendering import AdvicePrompt

from .errors import ExternalCallError, OutputValidationError
from .genai_client import get_chat_model

logger = logging.getLogger(__name__)


class GenerativeModel(Protocol):
    """Anything that can answer a rendered prompt with JSON shaped like ``output_schema``."""

    async def complete(
        self, prompt: AdvicePrompt, output_schema: Type[BaseModel]
    ) -> dict[str, Any]: ...


def build_message_content(prompt: AdvicePrompt) -> list[dict[str, Any]]:
    content: list[dict[str, Any]] = [{"type": "text", "text": prompt.text}]
    for data_uri in prompt.media:
        content.append({"type": "image_url", "image_url": data_uri})
    return content


class GeminiGenerativeModel:
    def __init__(self, chat_model: Optional[BaseChatModel] = None) -> None:
        self.chat_model = chat_model or get_chat_model()

    async def complete(
        self, prompt: AdvicePrompt, output_schema: Type[BaseModel]
    ) -> dict[str, Any]:
        # The raw dict is returned; callers validate it against output_schema.
        model = self.chat_model.with_structured_output(
            output_schema.model_json_schema(by_alias=True),
            method="json_schema",
        )
        messages = [HumanMessage(content=build_message_content(prompt))]
        try:
            result = await model.ainvoke(messages)
        except OutputParserException as exc:
            logger.warning(
                "Model answer for %s could not be parsed: %s",
                output_schema.__name__,
                exc,
            )
            raise OutputValidationError(
                f"Model answer is not valid JSON for {output_schema.__name__}"
            ) from exc
        except Exception as exc:
            logger.exception("Model invocation failed for %s", output_schema.__name__)
            raise ExternalCallError(
                "AI model could not generate a response. Please retry."
            ) from exc

        if not isinstance(result, dict):
            raise OutputValidationError(
                f"Model answer for {output_schema.__name__} is not a JSON object"
            )
        return result


@lru_cache
def get_generative_model() -> GenerativeModel:
    return GeminiGenerativeModel()
