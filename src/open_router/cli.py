"""Typer CLI for the OpenRouter client."""

from __future__ import annotations

from typing import Any

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from open_router.client import DEFAULT_MODEL, OpenRouterClient
from open_router.config import load_configuration
from open_router.errors import OpenRouterError, OpenRouterHTTPError

app = typer.Typer(
    name="open-router",
    help="OpenRouter chat completions from the command line",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _client() -> OpenRouterClient:
    return OpenRouterClient(load_configuration())


def _fail(e: Exception) -> typer.Exit:
    if isinstance(e, OpenRouterHTTPError):
        console.print(f"[red]HTTP {e.status_code}: {escape(str(e.body))}[/red]")
    else:
        console.print(f"[red]{escape(str(e))}[/red]")
    return typer.Exit(1)


@app.command()
def models(
    limit: int = typer.Option(20, "--limit", "-n", help="Max models to display"),
) -> None:
    """List available models and pricing."""
    try:
        all_models = _client().list_models()
    except (OpenRouterError, httpx.HTTPError) as e:
        raise _fail(e)

    all_models.sort(key=lambda m: -m.input_price)

    table = Table(title="Available Models")
    table.add_column("Model ID", style="cyan", max_width=40)
    table.add_column("Tier", style="magenta")
    table.add_column("Input $/M", justify="right", style="green")
    table.add_column("Output $/M", justify="right", style="green")
    table.add_column("Context", justify="right")
    table.add_column("Vision", justify="center")

    for m in all_models[:limit]:
        table.add_row(
            m.id,
            m.tier.value,
            f"${m.input_price:.2f}",
            f"${m.output_price:.2f}",
            f"{m.context_window:,}",
            "Y" if m.vision else "-",
        )

    console.print(table)
    if len(all_models) > limit:
        console.print(
            f"\n[dim]Showing {limit} of {len(all_models)} models. Use --limit to see more.[/dim]"
        )


@app.command()
def complete(
    prompt: str = typer.Argument(help="The user message to send"),
    model: str = typer.Option(DEFAULT_MODEL, "--model", "-m", help="Model ID"),
    stream: bool = typer.Option(False, "--stream", "-s", help="Print tokens as they arrive"),
) -> None:
    """Send a single-message chat completion."""
    messages = [{"role": "user", "content": prompt}]

    def on_chunk(chunk: Any) -> None:
        for choice in chunk.get("choices", []):
            delta = choice.get("delta", {}).get("content")
            if delta:
                console.print(delta, end="", markup=False, highlight=False)

    try:
        result = _client().complete(messages, model=model, stream=on_chunk if stream else None)
    except (OpenRouterError, httpx.HTTPError) as e:
        raise _fail(e)

    # Streamed output was already printed chunk by chunk
    if result is None:
        console.print()
        return
    content = result["choices"][0]["message"]["content"]
    console.print(content, markup=False, highlight=False)
    console.print(f"\n[dim]  Model: {result.get('model', model)}[/dim]")
    if result.get("id"):
        console.print(f"[dim]  Generation ID: {result['id']}[/dim]")


@app.command()
def stats(
    generation_id: str = typer.Argument(help="Generation ID returned by a completion"),
) -> None:
    """Show token counts and cost of a generation."""
    try:
        data = _client().query_generation_stats(generation_id)
    except (OpenRouterError, httpx.HTTPError) as e:
        raise _fail(e)

    table = Table(title=f"Generation {generation_id}")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, str(value))
    console.print(table)


@app.callback()
def main() -> None:
    """OpenRouter chat completions from the command line."""


if __name__ == "__main__":
    app()
