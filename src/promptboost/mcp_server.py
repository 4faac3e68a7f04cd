"""Model Context Protocol server exposing the enhancers as tools.

Runs over stdio. Each tool returns one text content item holding JSON: the
enhancement result, the strategy list, or an ``{"error": ...}`` envelope.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .core.config import Settings, load_settings
from .core.logging_setup import setup_logging
from .dispatch import ToolDispatcher
from .templates.legacy import INSTRUCTION_TYPES

logger = logging.getLogger(__name__)

SERVER_NAME = "prompt-enhancer"

ENHANCE_PROMPT = "enhance-prompt"
LIST_ENHANCERS = "list-enhancers"
ENHANCE_WITH_CONTEXT = "enhance-with-context"
ENHANCE_WITH_EXAMPLES = "enhance-with-examples"
ENHANCE_WITH_INSTRUCTIONS = "enhance-with-instructions"
ENHANCE_COMPREHENSIVE = "enhance-comprehensive"

_PROMPT_PROPERTY = {
    "type": "string",
    "minLength": 1,
    "description": "The original prompt to enhance",
}
_TOPIC_PROPERTY = {
    "type": "string",
    "description": "Topic to add context or examples about",
}
_DEPTH_PROPERTY = {
    "type": "integer",
    "description": "Depth of context to add (1-5)",
}
_COUNT_PROPERTY = {
    "type": "integer",
    "description": "Number of examples to add (1-5)",
}
_INSTRUCTION_PROPERTIES = {
    "instructionType": {
        "type": "string",
        "enum": list(INSTRUCTION_TYPES),
        "description": "Type of instructions to add",
    },
    "customInstructions": {
        "type": "string",
        "description": "Instructions used when instructionType is 'custom'",
    },
}


def build_tools(dispatcher: ToolDispatcher) -> List[Tool]:
    """Tool declarations for the dispatcher's enabled strategies."""
    # The schema needs at least one enum value even if nothing is enabled
    strategies = dispatcher.strategy_names or ["context"]

    return [
        Tool(
            name=ENHANCE_PROMPT,
            description="Enhances a prompt by adding context, examples, or specialized instructions",
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": _PROMPT_PROPERTY,
                    "strategy": {
                        "type": "string",
                        "enum": strategies,
                        "description": "The enhancement strategy to use",
                    },
                    "options": {
                        "type": "object",
                        "description": "Strategy-specific options",
                    },
                },
                "required": ["prompt", "strategy"],
            },
        ),
        Tool(
            name=LIST_ENHANCERS,
            description="Lists all available prompt enhancement strategies",
            inputSchema={"type": "object", "properties": {}},
        ),
        Tool(
            name=ENHANCE_WITH_CONTEXT,
            description="(Deprecated) Adds canned context about a topic using the configured template",
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": _PROMPT_PROPERTY,
                    "topic": _TOPIC_PROPERTY,
                    "depth": _DEPTH_PROPERTY,
                },
                "required": ["prompt"],
            },
        ),
        Tool(
            name=ENHANCE_WITH_EXAMPLES,
            description="(Deprecated) Adds canned examples about a topic using the configured template",
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": _PROMPT_PROPERTY,
                    "topic": _TOPIC_PROPERTY,
                    "count": _COUNT_PROPERTY,
                },
                "required": ["prompt"],
            },
        ),
        Tool(
            name=ENHANCE_WITH_INSTRUCTIONS,
            description="(Deprecated) Adds canned instructions using the configured template",
            inputSchema={
                "type": "object",
                "properties": {"prompt": _PROMPT_PROPERTY, **_INSTRUCTION_PROPERTIES},
                "required": ["prompt"],
            },
        ),
        Tool(
            name=ENHANCE_COMPREHENSIVE,
            description="(Deprecated) Adds context, examples and instructions in sequence",
            inputSchema={
                "type": "object",
                "properties": {
                    "prompt": _PROMPT_PROPERTY,
                    "topic": _TOPIC_PROPERTY,
                    "depth": _DEPTH_PROPERTY,
                    "count": _COUNT_PROPERTY,
                    **_INSTRUCTION_PROPERTIES,
                },
                "required": ["prompt"],
            },
        ),
    ]


def handle_tool_call(
    dispatcher: ToolDispatcher,
    name: str,
    arguments: Optional[Dict[str, Any]]
) -> Any:
    """Route a tool call to the dispatcher and return its JSON-ready payload."""
    args = arguments or {}
    prompt = args.get("prompt", "")

    if name == ENHANCE_PROMPT:
        return dispatcher.enhance_prompt(prompt, args.get("strategy", ""), args.get("options"))
    if name == LIST_ENHANCERS:
        return dispatcher.list_enhancers()
    if name == ENHANCE_WITH_CONTEXT:
        return dispatcher.enhance_with_context(prompt, args.get("topic"), args.get("depth"))
    if name == ENHANCE_WITH_EXAMPLES:
        return dispatcher.enhance_with_examples(prompt, args.get("topic"), args.get("count"))
    if name == ENHANCE_WITH_INSTRUCTIONS:
        return dispatcher.enhance_with_instructions(
            prompt,
            args.get("instructionType") or "clarity",
            args.get("customInstructions"),
        )
    if name == ENHANCE_COMPREHENSIVE:
        return dispatcher.enhance_comprehensive(
            prompt,
            args.get("topic"),
            args.get("depth"),
            args.get("count"),
            args.get("instructionType") or "clarity",
            args.get("customInstructions"),
        )

    logger.error("Unknown tool: %s", name)
    return {"error": f"Unknown tool: {name}"}


def create_server(settings: Optional[Settings] = None) -> Server:
    """Build an MCP server bound to a dispatcher over the enabled enhancers."""
    dispatcher = ToolDispatcher.from_settings(settings)
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return build_tools(dispatcher)

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        payload = handle_tool_call(dispatcher, name, arguments)
        return [TextContent(type="text", text=json.dumps(payload))]

    return server


async def serve_stdio(settings: Optional[Settings] = None) -> None:
    """Serve the tools over stdin/stdout until the client disconnects."""
    server = create_server(settings)
    logger.info("Starting prompt enhancer MCP server")
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Server started successfully")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point."""
    settings = load_settings()
    setup_logging(settings)
    asyncio.run(serve_stdio(settings))


if __name__ == "__main__":
    main()
