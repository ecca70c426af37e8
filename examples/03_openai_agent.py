#!/usr/bin/env python3
"""
Example 03: Minimal OpenAI function-calling agent.

A simple chat agent that answers questions about a Sui wallet by calling
the SDK's tools via OpenAI function calling.

Requirements:
    pip install sui-agent-sdk[openai]
    export OPENAI_API_KEY=sk-...
    export SUI_WALLET_ADDRESS=0x7d20...

Usage:
    python examples/03_openai_agent.py "How much SUI did I send last week?"
    python examples/03_openai_agent.py "Show my transactions from yesterday"
"""

import asyncio
import json
import sys

try:
    from openai import AsyncOpenAI
except ImportError:
    print("Install OpenAI: pip install sui-agent-sdk[openai]")
    sys.exit(1)

from sui_agent import SuiClient, SuiConfig, Wallet
from sui_agent.tools import SuiToolkit

SYSTEM_PROMPT = (
    "You are a Sui blockchain assistant for the user's wallet. "
    "Use the provided tools to answer questions about balances, objects, "
    "transaction history and SUI / USDC flows. Relay reports as returned. "
    "Be concise and helpful."
)


async def main(question: str) -> None:
    config = SuiConfig.from_env()
    async with SuiClient(config.rpc_url, timeout=config.timeout) as sui:
        toolkit = SuiToolkit(sui, Wallet.read_only(config.wallet_address), config)
        llm = AsyncOpenAI()
        tools = toolkit.to_openai_tools()
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": question},
        ]

        print(f"Question: {question}")
        print()

        # First call: the LLM decides which tools to call
        response = await llm.chat.completions.create(model="gpt-4o-mini", tools=tools, messages=messages)
        choice = response.choices[0]

        if not choice.message.tool_calls:
            print(f"🤖 {choice.message.content}")
            return

        messages.append(choice.message)
        for tool_call in choice.message.tool_calls:
            fn_name = tool_call.function.name
            fn_args = json.loads(tool_call.function.arguments or "{}")
            print(f"🔧 Calling: {fn_name}({fn_args})")

            result = await toolkit.execute_tool(fn_name, fn_args)
            print(f"   Result: {result}")
            print()

            messages.append({"role": "tool", "tool_call_id": tool_call.id, "content": result})

        # Second call: the LLM synthesizes the answer
        final = await llm.chat.completions.create(model="gpt-4o-mini", tools=tools, messages=messages)
        print(f"🤖 {final.choices[0].message.content}")


if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:]) or "What is my SUI summary for the last week?"))
