#!/usr/bin/env python3
"""
Example 04: LangGraph ReAct agent over the Sui wallet tools.

Runs against OpenAI by default, or a local Ollama model with --ollama.

Requirements:
    pip install sui-agent-sdk[langchain]
    export SUI_WALLET_ADDRESS=0x7d20...
    export OPENAI_API_KEY=sk-...        # OpenAI backend only

Usage:
    python examples/04_langgraph_agent.py "What did I do yesterday?"
    python examples/04_langgraph_agent.py --ollama --model llama3.1 "Summarize my last month"
"""

import argparse
import asyncio
import os

from langchain_core.messages import HumanMessage
from langgraph.prebuilt import create_react_agent

from sui_agent import SuiClient, SuiConfig, Wallet
from sui_agent.tools import SuiToolkit

# Suppress LangChain tracing
os.environ["LANGCHAIN_TRACING_V2"] = "false"

SYSTEM_PROMPT = """
You are a helpful assistant for a Sui blockchain wallet.
- For questions about past activity, call get_transaction_history.
- For totals of SUI or USDC sent and received, call get_sui_summary.
- Pass the user's time period ("today", "yesterday", "last week", "45 days") as time_filter.
- Relay the report text to the user; do not invent transactions.
"""


def build_llm(args: argparse.Namespace):
    if args.ollama:
        from langchain_ollama import ChatOllama
        return ChatOllama(model=args.model or "llama3.1", base_url=os.getenv("OLLAMA_HOST", "http://localhost:11434"))

    from langchain_openai import ChatOpenAI
    return ChatOpenAI(model=args.model or "gpt-4o-mini")


async def main(args: argparse.Namespace) -> None:
    if not args.ollama and "OPENAI_API_KEY" not in os.environ:
        print("ERROR: OPENAI_API_KEY environment variable is required (or pass --ollama).")
        return

    config = SuiConfig.from_env()
    async with SuiClient(config.rpc_url, timeout=config.timeout) as client:
        toolkit = SuiToolkit(client, Wallet.read_only(config.wallet_address), config)

        info = await toolkit.get_network_info()
        print(f"> Connected to {info['network']} (checkpoint {info['latest_checkpoint']})")

        tools = toolkit.to_langchain_tools()
        print(f"> Registered {len(tools)} Sui tools.")

        agent = create_react_agent(build_llm(args), tools, prompt=SYSTEM_PROMPT)

        print(f"\n[USER PROMPT]: {args.prompt}\n")
        state = await agent.ainvoke({"messages": [HumanMessage(content=args.prompt)]})

        for message in state["messages"]:
            if message.type == "ai" and message.content:
                print(f"\n[AI]: {message.content}")
            elif message.type == "tool":
                print(f"\n[TOOL {message.name}] -> {message.content}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--ollama", action="store_true", help="Use a local Ollama model")
    parser.add_argument("--model", help="Model name override")
    parser.add_argument("prompt", nargs="?", default="Show my transaction history for the last week")
    asyncio.run(main(parser.parse_args()))
