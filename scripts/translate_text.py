#!/usr/bin/env python3
"""
Translate text through a full language session (backend -> mirrors -> dictionary).
Useful to check what the UI would show and whether the pipeline is healthy.
"""

import argparse
import asyncio
import sys
import os

# Add parent dir to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables
from dotenv import load_dotenv
load_dotenv()

from adapters.loader import build_client_services
from config.settings import settings
from infrastructure.storage import MemoryLanguageStore


async def run(texts, language: str, source: str) -> int:
    services = build_client_services(settings, store=MemoryLanguageStore())
    session = services.session
    try:
        if not await session.change_language(language):
            print(f"Unsupported language: {language}")
            return 2

        status = session.status
        print(f"Language: {session.current_language} ({session.state.value})")
        if not status.working:
            print(f"  WARNING: {status.error}")

        translations = await session.translate_texts(texts, source)
        for original, translated in zip(texts, translations):
            print(f"  {original}  ->  {translated}")

        stats = session.cache.stats()
        print(f"Cache: {stats['total']} entries")
        return 0 if status.working else 1
    finally:
        await services.close()


def main():
    parser = argparse.ArgumentParser(
        description="Translate UI text through the translation fallback chain",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/translate_text.py "Welcome" "Please Login now"
    python scripts/translate_text.py --language en --source am "ግባ"
        """
    )
    parser.add_argument("texts", nargs="+", help="Text(s) to translate")
    parser.add_argument("--language", "-l", default="am", help="Target language code (default: am)")
    parser.add_argument("--source", "-s", default="en", help="Source language code (default: en)")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.texts, args.language, args.source)))


if __name__ == "__main__":
    main()
