#!/usr/bin/env python3
"""Example 1: Streaming and fallback completions.

Streams a completion token by token, then sends a non-streamed request with
a fallback model list and prints the generation's cost.

Requires OPENROUTER_API_KEY. Estimated cost: under $0.01 per run.

Usage:
    python examples/01_streaming_completion.py
"""

from __future__ import annotations

from typing import Any

from rich.console import Console

from open_router import OpenRouterClient, load_configuration

console = Console()

MESSAGES = [{"role": "user", "content": "Write a haiku about HTTP streaming."}]


def print_delta(chunk: Any) -> None:
    for choice in chunk.get("choices", []):
        delta = choice.get("delta", {}).get("content")
        if delta:
            console.print(delta, end="", markup=False, highlight=False)


def main() -> None:
    client = OpenRouterClient(load_configuration())

    console.print("\n[bold cyan]Streaming[/bold cyan]\n")
    client.complete(MESSAGES, model="openai/gpt-4.1-mini", stream=print_delta)
    console.print("\n")

    console.print("[bold cyan]Fallback route[/bold cyan]\n")
    result = client.complete(
        MESSAGES,
        model=["openai/gpt-4.1-nano", "openai/gpt-4.1-mini"],
        extras={"max_tokens": 100},
    )
    assert result is not None
    console.print(result["choices"][0]["message"]["content"], markup=False)
    console.print(f"\n[dim]Answered by {result['model']}[/dim]")

    stats = client.query_generation_stats(result["id"])
    console.print(f"[dim]Cost: ${stats.get('total_cost', 0):.6f}[/dim]\n")


if __name__ == "__main__":
    main()
