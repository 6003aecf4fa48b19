"""Command line: answer a query with AI, manage provider keys, show the version."""

from __future__ import annotations

import argparse
import sys

from zena.config import Config, config_path, default_config, load_config, save_config
from zena.helpers import get_ai_api_key, validate_key_provider
from zena.providers import ProviderAPIError, fetch_response
from zena.render import render_responses

VERSION = "0.1.0"

_SUBCOMMANDS = ("config", "version")
_KEY_PROVIDERS = ("openai", "anthropic", "gemini")

_ROOT_DESCRIPTION = """\
Zena is a command-line assistant that asks an AI model
(OpenAI, Anthropic, Gemini) to generate, explain or run commands
and to answer natural language queries from your terminal.

The answer is shown with command suggestions, warnings, notes
and revert instructions."""

_ROOT_EPILOG = """\
examples:
  zena "how to create a zip file in linux"
  zena "give me a curl command to send a POST request with JSON"
  zena "remove a directory recursively in bash\""""

_CONFIG_DESCRIPTION = """\
Manage API keys for the AI providers (OpenAI, Anthropic, Gemini)
and choose the default provider."""

_CONFIG_EPILOG = """\
examples:
  zena config set openai <your-api-key>     Set your OpenAI API key
  zena config set default openai            Make OpenAI the default provider
  zena config --list                        List configured providers"""

_SET_EPILOG = """\
usage:
  zena config set openai <your-api-key>       Set the API key for OpenAI
  zena config set anthropic <your-api-key>    Set the API key for Anthropic
  zena config set gemini <your-api-key>       Set the API key for Gemini
  zena config set default openai              Make OpenAI the default provider

The default provider is used when no provider is given explicitly."""


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the ``config`` and ``version`` commands and help."""
    formatter = argparse.RawDescriptionHelpFormatter
    parser = argparse.ArgumentParser(
        prog="zena",
        usage="zena [-h] query [query ...] | zena {config,version} ...",
        description=_ROOT_DESCRIPTION,
        epilog=_ROOT_EPILOG,
        formatter_class=formatter,
    )
    commands = parser.add_subparsers(dest="command", metavar="{config,version}")

    config_parser = commands.add_parser(
        "config",
        help="manage AI provider API keys and preferences",
        description=_CONFIG_DESCRIPTION,
        epilog=_CONFIG_EPILOG,
        formatter_class=formatter,
    )
    config_parser.add_argument(
        "--list",
        dest="list_providers",
        action="store_true",
        help="list all configured providers and the default",
    )
    config_commands = config_parser.add_subparsers(dest="config_command", metavar="{set}")
    set_parser = config_commands.add_parser(
        "set",
        help="set an API key or the default provider",
        description="Set API keys or change the default provider.",
        epilog=_SET_EPILOG,
        formatter_class=formatter,
    )
    set_parser.add_argument("target", metavar="provider|default")
    set_parser.add_argument("value")

    commands.add_parser(
        "version",
        help="print the current version",
        description="Print the installed version of the Zena CLI.",
    )
    return parser


def format_config_list(config: Config) -> str:
    """Return the listing of providers that have an API key."""
    lines = ["📦 Configured Providers:"]
    for name in _KEY_PROVIDERS:
        settings = config.provider(name)
        if settings.key:
            lines.append(f"  - {name:<11}✅  (default: {str(settings.default).lower()})")
    return "\n".join(lines)


def _ensure_config() -> int:
    try:
        load_config()
    except FileNotFoundError:
        try:
            save_config(default_config())
        except OSError as exc:
            print(f"❌ Failed to create default configuration: {exc}", file=sys.stderr)
            return 1
        print("✅ Default configuration created at:", config_path(), file=sys.stderr)
    except (OSError, ValueError) as exc:
        print(f"❌ Failed to load configuration: {exc}", file=sys.stderr)
        return 1
    return 0


def _run_query(query: str) -> int:
    try:
        provider, api_key = get_ai_api_key()
    except (OSError, ValueError) as exc:
        print("❌ Failed to retrieve AI API key:", exc)
        return 0
    try:
        validate_key_provider(provider, api_key)
    except (OSError, ValueError) as exc:
        print("❌ Invalid API key or unsupported provider:", exc)
        return 0
    try:
        answer = fetch_response(query, provider, api_key)
    except (ProviderAPIError, OSError, ValueError) as exc:
        print("❌ Error fetching AI response:", exc)
        return 0
    print(render_responses(answer))
    return 0


def _save(config: Config) -> bool:
    try:
        save_config(config)
    except OSError as exc:
        print("❌ Failed to save config:", exc)
        return False
    return True


def _run_set(target: str, value: str) -> int:
    target = target.lower()
    try:
        config = load_config()
    except (OSError, ValueError) as exc:
        print("❌ Failed to load config:", exc)
        return 1

    if target in _KEY_PROVIDERS:
        config.provider(target).key = value
        if not _save(config):
            return 1
        print(f"✅ API key set for '{target}'")
    elif target == "default":
        provider = value.lower()
        try:
            config.set_default(provider)
        except ValueError:
            print("❌ Invalid provider. Choose from: openai, anthropic, gemini")
            return 0
        if not _save(config):
            return 1
        print(f"✅ Default provider set to '{provider}'")
    else:
        print("❌ Invalid usage. Try:")
        print("  zena config set openai <apiKey>")
        print("  zena config set default <provider>")
    return 0


def _run_list() -> int:
    try:
        config = load_config()
    except (OSError, ValueError) as exc:
        print("❌ Failed to load config:", exc)
        return 1
    print(format_config_list(config))
    return 0


def _exit_code(code: object) -> int:
    if code is None:
        return 0
    return code if isinstance(code, int) else 1


def main(argv: list[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    status = _ensure_config()
    if status:
        return status

    if args and args[0] not in _SUBCOMMANDS and not args[0].startswith("-"):
        return _run_query(" ".join(args))

    parser = build_parser()
    try:
        options = parser.parse_args(args)
    except SystemExit as exc:
        return _exit_code(exc.code)

    if options.command == "version":
        print(f"Zena CLI Version: {VERSION}")
        return 0
    if options.command == "config":
        if options.config_command == "set":
            return _run_set(options.target, options.value)
        if options.list_providers:
            return _run_list()
        parser.parse_args(["config", "--help"]) if False else _print_config_help(parser)
        return 0

    parser.print_usage(sys.stderr)
    print("Error: requires at least 1 arg(s), only received 0", file=sys.stderr)
    return 1


def _print_config_help(parser: argparse.ArgumentParser) -> None:
    try:
        parser.parse_args(["config", "--help"])
    except SystemExit:
        pass


if __name__ == "__main__":
    sys.exit(main())