from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

from rich.logging import RichHandler

from features.translator import TranslationService
from schemas.enums import Provider
from schemas.languages import SOURCE_LANGUAGES, TARGET_LANGUAGES, find_language
from schemas.models import Configuration, Failure, Success
from utils.model_file import ModelFile

logger = logging.getLogger("QuickTranslate")


def default_settings_file() -> Path:
    app_data = os.environ.get("APPDATA")
    base = Path(app_data) if app_data else Path.home() / ".config"
    return base / "QuickTranslate" / "settings.json"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quick-translate", description="Translate text with the configured provider.")
    parser.add_argument("text", nargs="?", help="text to translate; read from stdin when omitted")
    parser.add_argument("--from", dest="from_language", help="source language code")
    parser.add_argument("--to", dest="to_language", help="target language code")
    parser.add_argument("--provider", choices=[provider.value for provider in Provider], help="override the provider")
    parser.add_argument("--settings", type=Path, default=default_settings_file(), help="settings file")
    parser.add_argument("--list-languages", action="store_true", help="show selectable languages and exit")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser


def setup_logging(*, debug: bool) -> None:
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    if logger.handlers:
        return

    handler = RichHandler(
        rich_tracebacks=True,
        log_time_format="%H:%M:%S",
        show_path=debug,
        enable_link_path=debug,
    )
    handler.setFormatter(logging.Formatter("%(name)-22s - %(message)s"))
    logger.addHandler(handler)


def print_languages() -> None:
    print("Source languages:")
    for language in SOURCE_LANGUAGES:
        print(f"  {language.value:<4} {language.display_name}")
    print("Target languages:")
    for language in TARGET_LANGUAGES:
        print(f"  {language.value:<4} {language.display_name}")


async def run(args: argparse.Namespace, configuration: Configuration, text: str) -> int:
    if args.provider is not None:
        configuration = configuration.model_copy(update={"selected_provider": Provider(args.provider)})

    async with TranslationService(logger, configuration) as service:
        outcome = await service.translate(text, args.from_language, args.to_language)

    match outcome:
        case Success(text=translated):
            print(translated)
            return 0
        case Failure() as failure:
            print(failure.message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.from_language is not None and find_language(args.from_language, SOURCE_LANGUAGES) is None:
        parser.error(f"unsupported source language: {args.from_language}")
    if args.to_language is not None and find_language(args.to_language, TARGET_LANGUAGES) is None:
        parser.error(f"unsupported target language: {args.to_language}")

    setup_logging(debug=args.debug)

    if args.list_languages:
        print_languages()
        return 0

    settings = ModelFile(Configuration, args.settings, logger, Configuration)
    text = args.text if args.text is not None else sys.stdin.read()

    return asyncio.run(run(args, settings.data, text))


if __name__ == "__main__":
    sys.exit(main())
