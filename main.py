"""Command-line entry point: run one completion through the configured LLM.

Reads the LLM record from the environment (``LLM_TYPE``, ``LLM_MODEL``,
``OPENAI_API_KEY``, ``OPENAI_BASE_URL``; a ``.env`` file is honored) and prints
the completion text on stdout.
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

from config.llm import ConfigIncompleteError, LLMConfig
from llm import ServiceError, create_provider
from utils.logging import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate an LLM completion")
    parser.add_argument("--instructions", default="", help="System instructions")
    parser.add_argument(
        "--input",
        dest="input_text",
        default=None,
        help="User input (plain text or a JSON messages payload); read from stdin if omitted",
    )
    parser.add_argument("--max-tokens", type=int, default=1024, help="Maximum output tokens")
    parser.add_argument("--timeout", type=float, default=None, help="Per-call deadline in seconds")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    """Build the provider and print one completion. Returns a process exit code."""
    try:
        llm = LLMConfig.from_env()
        provider = create_provider(llm)
    except ConfigIncompleteError as exc:
        logger.error(f"LLM configuration incomplete: {exc}")
        return 1
    except (ValueError, KeyError) as exc:
        logger.error(f"Invalid LLM configuration: {exc}")
        return 1

    input_text = args.input_text if args.input_text is not None else sys.stdin.read()

    try:
        result = await provider.generate_response(
            args.instructions, input_text, args.max_tokens, timeout=args.timeout
        )
    except ServiceError as exc:
        logger.error(f"LLM call failed (code={exc.code.value}): {exc.message}")
        return 1

    print(result.output_text)
    logger.info(f"Tokens used: {result.tokens_used}")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv(override=True)
    setup_logging()
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
