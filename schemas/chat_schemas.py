# schemas/chat_schemas.py
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field


class ConversationTurn(BaseModel):
    """Represents a single message in the conversation sent to the completion API."""
    role: Literal["system", "developer", "user", "assistant", "tool"]
    content: Optional[str] = None
    tool_calls: Optional[List[Dict[str, Any]]] = None
    tool_call_id: Optional[str] = None
    name: Optional[str] = None

    def to_message(self) -> Dict[str, Any]:
        """The wire form expected by the OpenAI SDK."""
        return self.model_dump(exclude_none=True)


class QuestionRequest(BaseModel):
    """Defines the structure for an /ask or /investigate request body."""
    question: str = Field(..., min_length=1, max_length=2000)


class AssistantAnswer(BaseModel):
    """The answer to a question, together with what it cost to produce."""
    answer: str
    tokens: int = 0
    cost: float = 0.0
    input_tokens: int = 0
    output_tokens: int = 0
