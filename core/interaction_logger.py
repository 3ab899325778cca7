# core/interaction_logger.py
"""
One access-log style line per handled command, e.g.

    CMD /ask by Rylai#1234 200 - 842 ms - Tokens: 154 - Cost: $0.000092
"""
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger("interactions")

ANONYMOUS_USER = "anonymous"


@dataclass
class Interaction:
    command: str
    user: str = ANONYMOUS_USER
    status: int = 200
    tokens: int = 0
    cost: float = 0.0


def format_interaction(interaction: Interaction, duration_ms: float) -> str:
    tokens = str(interaction.tokens) if interaction.tokens else "-"
    cost = f"${interaction.cost:.6f}" if interaction.cost else "-"
    return (
        f"CMD /{interaction.command} by {interaction.user} {interaction.status} - "
        f"{duration_ms:.0f} ms - Tokens: {tokens} - Cost: {cost}"
    )


def log_interaction(interaction: Interaction, duration_ms: float) -> None:
    logger.info(format_interaction(interaction, duration_ms))


@contextmanager
def track_interaction(command: str, user: str | None = None) -> Iterator[Interaction]:
    """
    Times the wrapped block and logs the interaction when it exits.

    The caller fills in status/tokens/cost on the yielded record. An exception
    escaping the block is logged with status 500 unless a status was already set.
    """
    interaction = Interaction(command=command, user=user or ANONYMOUS_USER)
    started = time.perf_counter()
    try:
        yield interaction
    except Exception:
        if interaction.status < 400:
            interaction.status = 500
        raise
    finally:
        log_interaction(interaction, (time.perf_counter() - started) * 1000)
