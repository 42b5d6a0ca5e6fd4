"""CLI to verify the configured model provider answers, without any relay logic."""
from __future__ import annotations

import argparse
import sys

from zenith.core.config import settings
from zenith.core.logging import configure_logging
from zenith.llm.base import ModelCallError, ModelClient
from zenith.llm.factory import get_model_client

MODEL_NOT_FOUND_HINT = (
    "SUGGESTION: The API key might be valid but the model alias '{model}' is not reachable. "
    "Check GEMINI_MODEL / OPENAI_MODEL."
)


def run_check(client: ModelClient, prompt: str) -> int:
    print(f"Provider: {client.provider} (model: {client.model})")
    print(f"Key: {client.masked_key()}")
    if not client.is_available():
        print("No API key configured; the relay will serve offline fallbacks.", file=sys.stderr)
        return 1

    print(f"Sending request to {client.model}...")
    try:
        reply = client.submit(prompt)
    except ModelCallError as exc:
        print(f"Model error: {exc}", file=sys.stderr)
        if "404" in str(exc):
            print(MODEL_NOT_FOUND_HINT.format(model=client.model), file=sys.stderr)
        return 1

    print("SUCCESS!")
    print(reply)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send one prompt to the configured model provider.")
    parser.add_argument("--prompt", default="Hello?", help="Prompt text to send.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    configure_logging(log_level="DEBUG" if args.debug else settings.log_level)
    return run_check(get_model_client(), args.prompt)


if __name__ == "__main__":  # pragma: no cover - manual launch
    raise SystemExit(main())
