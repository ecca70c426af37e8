"""Anthropic tool-use definitions for SuiToolkit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sui_agent.tools.openai_tools import build_openai_tools

if TYPE_CHECKING:
    from sui_agent.tools.toolkit import SuiToolkit


def build_anthropic_tools(toolkit: SuiToolkit) -> list[dict[str, Any]]:
    """Return a list of Anthropic tool-use definitions (same tools as OpenAI)."""
    tools = []
    for tool in build_openai_tools(toolkit):
        fn = tool["function"]
        schema = {k: v for k, v in fn["parameters"].items() if k != "required" or v}
        tools.append({
            "name": fn["name"],
            "description": fn["description"],
            "input_schema": schema,
        })
    return tools
