# core/ai_orchestrator.py
"""
OpenAI-powered Dota 2 assistant.

`ask` runs the tool-calling exchange against the chat completions API:

    AWAITING_FIRST_RESPONSE --(no tool call)--> DONE
    AWAITING_FIRST_RESPONSE --(tool call)--> RESOLVING_TOOLS
        --> AWAITING_SECOND_RESPONSE --> DONE

Token usage is added on every transition that consumed a response, so the
reported usage always covers exactly the requests that were made.

`investigate` is a single Responses API request with web search enabled. It
never raises; any failure becomes a fixed apology with zero usage.
"""
import datetime
import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List

import openai
from openai import AsyncOpenAI

from core.exceptions import UpstreamError
from core.pricing import TokenUsage, calculate_cost
from core.tool_definitions import OPENAI_TOOLS, TOOL_REGISTRY
from schemas.chat_schemas import AssistantAnswer, ConversationTurn
from services.dota_logic.api_client import OpenDotaClient

logger = logging.getLogger(__name__)

ASK_SYSTEM_PROMPT = (
    "You are a knowledgeable Dota 2 assistant. Answer questions about Dota 2 heroes, items, strategies, "
    "mechanics, meta, patches, and lore. You can fetch and analyze specific Dota 2 match details using a tool "
    "if a user provides a match ID. Keep answers concise (under 1500 characters) and informative. Use specific "
    "numbers and facts when possible. If a question is not related to Dota 2, politely redirect the user to ask "
    "a Dota 2 question instead."
)

INVESTIGATE_SYSTEM_PROMPT = """You are an advanced Dota 2 research assistant. Today's date is {today}. When a user asks a complex question about the meta, patches, item builds, or heroes, you MUST perform deep research to find the most accurate and up-to-date information before answering.
- ALWAYS search the web to find the exact current live patch version of Dota 2 BEFORE searching for meta information, because your training data cutoff means you do not know the current patch.
- Once you know the current patch, search the web to find recent patch notes, meta tier lists, and item build guides related to the user's query.

Synthesize the data you gather. Keep answers concise (under 1500 characters) and informative, citing the sources or data you found where relevant. If a question is not related to Dota 2, politely redirect the user to ask a Dota 2 question instead."""

INVESTIGATION_FAILED_ANSWER = (
    "I encountered an error while researching this topic. "
    "Try simplifying your query or asking a different question."
)


class Phase(str, Enum):
    AWAITING_FIRST_RESPONSE = "awaiting_first_response"
    RESOLVING_TOOLS = "resolving_tools"
    AWAITING_SECOND_RESPONSE = "awaiting_second_response"
    DONE = "done"


@dataclass
class AskRun:
    """State of one `ask` exchange."""
    messages: List[ConversationTurn]
    phase: Phase = Phase.AWAITING_FIRST_RESPONSE
    usage: TokenUsage = field(default_factory=TokenUsage)

    def advance(self, phase: Phase, consumed: TokenUsage | None = None) -> None:
        if consumed is not None:
            self.usage = self.usage + consumed
        logger.debug(f"Ask run: {self.phase.value} -> {phase.value} (usage so far: {self.usage.total} tokens)")
        self.phase = phase

    @property
    def wire_messages(self) -> List[dict]:
        return [turn.to_message() for turn in self.messages]


def _chat_usage(response: Any) -> TokenUsage:
    usage = getattr(response, "usage", None)
    if usage is None:
        return TokenUsage()
    return TokenUsage(input_tokens=usage.prompt_tokens or 0, output_tokens=usage.completion_tokens or 0)


def _responses_usage(response: Any) -> TokenUsage:
    usage = getattr(response, "usage", None)
    if usage is None:
        return TokenUsage()
    return TokenUsage(input_tokens=usage.input_tokens or 0, output_tokens=usage.output_tokens or 0)


def _serialize_tool_result(result: Any) -> str:
    if hasattr(result, "model_dump_json"):
        return result.model_dump_json()
    return json.dumps(result)


class DotaAssistant:
    """Answers Dota 2 questions with OpenAI, fetching match data on demand."""

    def __init__(
            self,
            client: AsyncOpenAI,
            dota_client: OpenDotaClient,
            *,
            ask_model: str = "gpt-4o-mini",
            investigate_model: str = "gpt-4o",
            max_tokens: int = 1024,
            temperature: float = 0.7,
            today: Callable[[], datetime.date] = datetime.date.today,
    ):
        self.client = client
        self.dota_client = dota_client
        self.ask_model = ask_model
        self.investigate_model = investigate_model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._today = today

    # --- Direct Q&A ---

    async def ask(self, question: str) -> AssistantAnswer:
        """
        Answers a question, letting the model fetch a match summary if it needs one.

        Raises:
            UpstreamError: Either completion request failed. Failures of the
                match fetch itself are handed back to the model instead.
        """
        run = AskRun(messages=[
            ConversationTurn(role="system", content=ASK_SYSTEM_PROMPT),
            ConversationTurn(role="user", content=question),
        ])

        first_response = await self._create_chat_completion(
            model=self.ask_model,
            messages=run.wire_messages,
            tools=OPENAI_TOOLS,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        response_message = first_response.choices[0].message

        if not response_message.tool_calls:
            run.advance(Phase.DONE, _chat_usage(first_response))
            return self._answer(run, response_message.content, self.ask_model)

        run.advance(Phase.RESOLVING_TOOLS, _chat_usage(first_response))
        run.messages.append(ConversationTurn(
            role="assistant",
            content=response_message.content,
            tool_calls=[
                {
                    "id": tool_call.id,
                    "type": "function",
                    "function": {"name": tool_call.function.name, "arguments": tool_call.function.arguments},
                }
                for tool_call in response_message.tool_calls
            ],
        ))
        for tool_call in response_message.tool_calls:
            content = await self._run_tool(tool_call.function.name, tool_call.function.arguments)
            run.messages.append(ConversationTurn(
                role="tool",
                tool_call_id=tool_call.id,
                name=tool_call.function.name,
                content=content,
            ))

        run.advance(Phase.AWAITING_SECOND_RESPONSE)
        second_response = await self._create_chat_completion(
            model=self.ask_model,
            messages=run.wire_messages,
            max_tokens=self.max_tokens,
        )
        run.advance(Phase.DONE, _chat_usage(second_response))
        return self._answer(run, second_response.choices[0].message.content, self.ask_model)

    async def _run_tool(self, name: str, raw_arguments: str) -> str:
        """Executes one requested tool call. Never raises: failures become an error payload."""
        handler = TOOL_REGISTRY.get(name)
        if handler is None:
            logger.warning(f"Model requested unknown tool '{name}'.")
            return json.dumps({"error": f"Unknown tool: {name}"})

        try:
            arguments = json.loads(raw_arguments or "{}")
            logger.info(f"OpenAI requested tool call: {name}({arguments})")
            result = await handler(self.dota_client, **arguments)
        except Exception as e:
            logger.warning(f"Tool '{name}' failed; returning the error to the model: {e}", exc_info=True)
            return json.dumps({"error": str(e)})
        return _serialize_tool_result(result)

    async def _create_chat_completion(self, **request: Any) -> Any:
        try:
            return await self.client.chat.completions.create(**request)
        except openai.APIStatusError as e:
            logger.error(f"OpenAI chat completion failed: {e.status_code} {e.message}")
            raise UpstreamError(f"OpenAI API error: {e.message}", status=e.status_code) from e
        except openai.APIError as e:
            logger.error(f"OpenAI chat completion could not be completed: {e}")
            raise UpstreamError("Could not reach the OpenAI API") from e

    # --- Deep Research ---

    async def investigate(self, question: str) -> AssistantAnswer:
        """Researches a question with web search. Always returns an answer."""
        system_prompt = INVESTIGATE_SYSTEM_PROMPT.format(today=self._today().isoformat())
        try:
            response = await self.client.responses.create(
                model=self.investigate_model,
                tools=[{"type": "web_search"}],
                input=[
                    {"role": "developer", "content": system_prompt},
                    {"role": "user", "content": question},
                ],
                temperature=self.temperature,
            )
            usage = _responses_usage(response)
            answer = response.output_text
        except Exception as e:
            logger.error(f"AI investigation failed: {e}", exc_info=True)
            return AssistantAnswer(answer=INVESTIGATION_FAILED_ANSWER, tokens=0, cost=0.0)

        return AssistantAnswer(
            answer=answer or "",
            tokens=usage.total,
            cost=calculate_cost(self.investigate_model, usage.input_tokens, usage.output_tokens),
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )

    @staticmethod
    def _answer(run: AskRun, content: str | None, model: str) -> AssistantAnswer:
        usage = run.usage
        return AssistantAnswer(
            answer=content or "",
            tokens=usage.total,
            cost=calculate_cost(model, usage.input_tokens, usage.output_tokens),
            input_tokens=usage.input_tokens,
            output_tokens=usage.output_tokens,
        )
