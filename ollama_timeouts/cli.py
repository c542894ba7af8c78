#!/usr/bin/env python3
"""
Demo CLI for the ollama timeout helpers.
"""

import argparse
import logging
import sys
from datetime import timedelta
from typing import Any, Optional

import httpx
import ollama
from dotenv import load_dotenv
from pydantic import ValidationError

from .domain.errors import TimeoutConfigurationError
from .domain.interfaces.llm_client import ChatClient
from .domain.timeouts import STANDARD_TIMEOUT, TimeoutPreset
from .infrastructure.config.settings import get_settings
from .infrastructure.ollama.client import OllamaClient, create_client
from .utils import format_timeout, setup_logging


def _double_or_standard(current: Optional[timedelta]) -> timedelta:
    # Double the current timeout, or use 5 minutes if not set
    return current * 2 if current is not None else STANDARD_TIMEOUT


def _extract_content(response: Any) -> str:
    if hasattr(response, 'message') and response.message:
        return getattr(response.message, 'content', None) or ''
    if isinstance(response, dict):
        return (response.get('message') or {}).get('content', '')
    return str(response)


def _send_prompt(client: ChatClient, host: str, model: str, prompt: str) -> int:
    print(f"Sending prompt to {model} (requires Ollama running at {host})...")
    try:
        response = client.chat(model=model, messages=[{'role': 'user', 'content': prompt}])
    except httpx.TimeoutException as e:
        print(f"Request timed out: {e}")
        print("The request exceeded the configured timeout.")
        print("Consider --preset extended for long-running requests.")
        return 1
    except (httpx.ConnectError, ConnectionError) as e:
        print(f"Connection error: {e}")
        print(f"Make sure Ollama is running at {host} with the {model} model.")
        return 1
    except httpx.RequestError as e:
        print(f"Error: request to {host} failed: {e}")
        return 1
    except ollama.ResponseError as e:
        print(f"Ollama error ({e.status_code}): {e.error}")
        return 1

    print("Response:")
    print(_extract_content(response))
    return 0


def _build_parser(default_host: str, default_model: str, default_log_level: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Demonstrates timeout configuration of ollama clients",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                          # Show presets and fluent configuration
  %(prog)s --preset extended --prompt "Tell a story" # Long request with a 30 minute timeout
  %(prog)s --timeout 90 --model llama3.2             # Explicit timeout in seconds
        """
    )
    parser.add_argument('--host',
                        default=default_host,
                        help='Ollama server URL (or set OLLAMA_HOST env var)')
    parser.add_argument('--model',
                        default=default_model,
                        help='Model name (or set OLLAMA_MODEL env var)')
    parser.add_argument('--preset',
                        choices=[p.value for p in TimeoutPreset],
                        help='Named timeout preset for the request client')
    parser.add_argument('--timeout',
                        type=float,
                        help='Request timeout in seconds (overrides --preset)')
    parser.add_argument('--prompt',
                        help='Send one chat message with the configured client')
    parser.add_argument('--log-level',
                        default=default_log_level,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Set logging level')
    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the timeout demo."""
    load_dotenv()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"❌ Error: invalid configuration\n{e}")
        return 2

    log_level = settings.log_level if settings.log_level != 'CRITICAL' else 'ERROR'
    parser = _build_parser(settings.host, settings.model, log_level)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    print("=== Ollama timeout helpers demo ===")
    print()

    default_client = OllamaClient(args.host, args.model)
    print(f"Default timeout: {format_timeout(default_client.get_timeout())}")
    print()

    print("--- Presets ---")
    for preset in TimeoutPreset:
        preset_client = OllamaClient(args.host, args.model).with_preset(preset)
        print(f"{preset.value.capitalize()} client timeout: {format_timeout(preset_client.timeout)}")
    print()

    print("--- Fluent configuration ---")
    fluent_client = OllamaClient(args.host, args.model).with_quick_timeout().set_timeout(timedelta(minutes=5))
    print(f"Fluent client timeout: {format_timeout(fluent_client.timeout)}")
    configured_client = OllamaClient(args.host, args.model).configure_timeout(_double_or_standard)
    print(f"Configured client timeout: {format_timeout(configured_client.timeout)}")
    print()

    try:
        client = create_client(
            args.host,
            args.model,
            timeout=args.timeout,
            preset=args.preset,
            settings=settings,
        )
    except TimeoutConfigurationError as e:
        print(f"❌ Error: {e}")
        return 2

    print(f"Request client timeout: {format_timeout(client.timeout)}")
    logger.debug(f"Request client: {client!r}")

    if not args.prompt:
        print()
        print("=== Demo complete ===")
        return 0

    return _send_prompt(client, client.host, client.model, args.prompt)


if __name__ == "__main__":
    sys.exit(main())
