"""Pok Deng decision endpoints."""

from fastapi import APIRouter, Request

from api.logging_utils import get_logger
from api.rate_limit import RATE_LIMIT, limiter
from api.schemas import (
    CardModel,
    HandEvaluationResponse,
    PokDengExplainResponse,
    PokDengRequest,
    PokDengResponse,
)
from config import config
from core.hand import Hand
from core.strategy import HandEvaluation, PokDengStrategy, StrategyMode
from core.validation import validate_batch

router = APIRouter()

logger = get_logger(__name__)


def _prepare(body: PokDengRequest) -> tuple[list[Hand], PokDengStrategy]:
    """Validate a request and pick the strategy it asks for."""
    hands = body.to_hands()
    validate_batch(hands, max_hands=config.strategy.max_hands)
    mode = StrategyMode.from_game_type(
        body.game_type,
        aggressive_basic=config.strategy.aggressive_basic,
    )
    return hands, PokDengStrategy(mode)


def _explain(evaluation: HandEvaluation) -> HandEvaluationResponse:
    """Serialize one evaluation."""
    return HandEvaluationResponse(
        cards=[CardModel.from_card(card) for card in evaluation.hand],
        value=evaluation.value,
        is_pok=evaluation.is_pok,
        special_draws=[special.value for special in evaluation.special_draws],
        chased=evaluation.chased.value if evaluation.chased else None,
        decision=evaluation.decision.value,
        reason=evaluation.reason.name.lower(),
    )


@router.post("")
@limiter.limit(RATE_LIMIT)
async def decide(request: Request, body: PokDengRequest) -> PokDengResponse:
    """Recommend hit or stand for every hand in the batch."""
    hands, strategy = _prepare(body)
    decisions = strategy.decide(hands)

    logger.debug(
        "Decided %d hands with %s strategy: %s",
        len(hands),
        strategy.mode.value,
        ",".join(str(d) for d in decisions),
    )

    return PokDengResponse(decisions=[d.value for d in decisions])


@router.post("/explain")
@limiter.limit(RATE_LIMIT)
async def explain(request: Request, body: PokDengRequest) -> PokDengExplainResponse:
    """Recommend hit or stand for every hand and say why."""
    hands, strategy = _prepare(body)
    evaluations = strategy.evaluate(hands)

    logger.debug("Explained %d hands with %s strategy", len(hands), strategy.mode.value)

    return PokDengExplainResponse(
        game_type=body.game_type,
        strategy=strategy.mode.value,
        hands=[_explain(evaluation) for evaluation in evaluations],
    )
