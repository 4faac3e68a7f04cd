"""Enhancement API routes."""

import time
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request

from ..schemas import (
    EnhanceRequest,
    EnhanceResponse,
    ContextChainRequest,
    ExamplesChainRequest,
    InstructionsChainRequest,
    ComprehensiveChainRequest,
    ChainResponse,
    StrategiesResponse,
    StrategyInfo,
    ErrorResponse,
)
from ...dispatch import ToolDispatcher, is_error

router = APIRouter(prefix="/enhance", tags=["enhancement"])


def get_dispatcher(request: Request) -> ToolDispatcher:
    """Dispatcher built by the application factory."""
    return request.app.state.dispatcher


def _raise_on_error(envelope: Dict[str, Any]) -> None:
    if is_error(envelope):
        raise HTTPException(status_code=400, detail=envelope["error"])


@router.post(
    "",
    response_model=EnhanceResponse,
    responses={400: {"model": ErrorResponse}}
)
async def enhance_prompt(
    request: EnhanceRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher)
) -> EnhanceResponse:
    """
    Enhance a prompt with a named strategy.

    Strategies:
    - **context**: prepend definitions and background (`contextType`, `depth`,
      `includeDefinitions`, `includeBackground`)
    - **example**: insert example blocks (`exampleCount`, `exampleType`, `position`)
    - **instruction**: append directives (`instructionType`, `addStepByStep`, `addReasoning`)
    - **domain-knowledge**: prepend domain knowledge (`domain` required, `depth`,
      `includeTerminology`, `includePrinciples`)
    """
    start_time = time.time()

    envelope = dispatcher.enhance_prompt(request.prompt, request.strategy, request.options)
    _raise_on_error(envelope)

    return EnhanceResponse(
        success=True,
        strategy=request.strategy,
        original_prompt=request.prompt,
        enhanced_prompt=envelope["enhancedPrompt"],
        metadata=envelope["metadata"],
        processing_time_ms=(time.time() - start_time) * 1000
    )


@router.get("/strategies", response_model=StrategiesResponse)
async def list_strategies(
    dispatcher: ToolDispatcher = Depends(get_dispatcher)
) -> StrategiesResponse:
    """List the enabled enhancement strategies."""
    strategies = [StrategyInfo(**s) for s in dispatcher.list_enhancers()]
    return StrategiesResponse(strategies=strategies, total=len(strategies))


def _chain_response(prompt: str, envelope: Dict[str, Any], start_time: float) -> ChainResponse:
    _raise_on_error(envelope)
    return ChainResponse(
        success=True,
        original_prompt=prompt,
        enhanced_prompt=envelope["enhancedPrompt"],
        processing_time_ms=(time.time() - start_time) * 1000
    )


@router.post(
    "/legacy/context",
    response_model=ChainResponse,
    responses={400: {"model": ErrorResponse}},
    deprecated=True
)
async def legacy_context(
    request: ContextChainRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher)
) -> ChainResponse:
    """Add canned context about a topic through the configured template."""
    start_time = time.time()
    envelope = dispatcher.enhance_with_context(request.prompt, request.topic, request.depth)
    return _chain_response(request.prompt, envelope, start_time)


@router.post(
    "/legacy/examples",
    response_model=ChainResponse,
    responses={400: {"model": ErrorResponse}},
    deprecated=True
)
async def legacy_examples(
    request: ExamplesChainRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher)
) -> ChainResponse:
    """Add canned examples about a topic through the configured template."""
    start_time = time.time()
    envelope = dispatcher.enhance_with_examples(request.prompt, request.topic, request.count)
    return _chain_response(request.prompt, envelope, start_time)


@router.post(
    "/legacy/instructions",
    response_model=ChainResponse,
    responses={400: {"model": ErrorResponse}},
    deprecated=True
)
async def legacy_instructions(
    request: InstructionsChainRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher)
) -> ChainResponse:
    """Add a canned instruction paragraph through the configured template."""
    start_time = time.time()
    envelope = dispatcher.enhance_with_instructions(
        request.prompt, request.instruction_type, request.custom_instructions
    )
    return _chain_response(request.prompt, envelope, start_time)


@router.post(
    "/legacy/comprehensive",
    response_model=ChainResponse,
    responses={400: {"model": ErrorResponse}},
    deprecated=True
)
async def legacy_comprehensive(
    request: ComprehensiveChainRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher)
) -> ChainResponse:
    """Run context, examples and instructions in sequence."""
    start_time = time.time()
    envelope = dispatcher.enhance_comprehensive(
        request.prompt,
        request.topic,
        request.depth,
        request.count,
        request.instruction_type,
        request.custom_instructions,
    )
    return _chain_response(request.prompt, envelope, start_time)
