# api/routers/chat.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from core.ai_orchestrator import DotaAssistant
from core.exceptions import DotaBotError
from core.interaction_logger import track_interaction
from schemas.chat_schemas import AssistantAnswer, QuestionRequest
from ..dependencies import get_assistant, get_user_tag, to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["Chat"]
)


@router.post("/ask", response_model=AssistantAnswer)
async def ask_endpoint(
        request: QuestionRequest,
        assistant: DotaAssistant = Depends(get_assistant),
        user: Optional[str] = Depends(get_user_tag),
) -> AssistantAnswer:
    """
    Answers a Dota 2 question. The model may fetch a match summary when the
    question mentions a match id.
    """
    with track_interaction("ask", user) as interaction:
        try:
            answer = await assistant.ask(request.question)
        except DotaBotError as e:
            logger.error(f"Error handling /ask: {e}", exc_info=True)
            http_error = to_http_exception(e, "The AI service failed to answer. Please try again later.")
            interaction.status = http_error.status_code
            raise http_error

        interaction.tokens = answer.tokens
        interaction.cost = answer.cost
        return answer


@router.post("/investigate", response_model=AssistantAnswer)
async def investigate_endpoint(
        request: QuestionRequest,
        assistant: DotaAssistant = Depends(get_assistant),
        user: Optional[str] = Depends(get_user_tag),
) -> AssistantAnswer:
    """
    Researches a question on the web, starting from the current patch.
    Always answers; research failures come back as an apology.
    """
    with track_interaction("investigate", user) as interaction:
        answer = await assistant.investigate(request.question)
        interaction.tokens = answer.tokens
        interaction.cost = answer.cost
        return answer
