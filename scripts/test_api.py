#!/usr/bin/env python
"""
Test Gemini API connection by generating one logo.

Usage:
    python scripts/test_api.py [--output FILE]
"""

import argparse
import sys
import time
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from logogen import ConfigurationError, LogogenError
from logogen.core.client import LogoClient
from logogen.core.config import Config


def main() -> None:
    """Test Gemini API connection."""
    parser = argparse.ArgumentParser(description="Generate one logo to check the API key")
    parser.add_argument(
        "--output",
        default="sample_logo.png",
        help="Output filename (default: sample_logo.png)",
    )
    args = parser.parse_args()

    print("Testing Gemini API connection...")
    print()

    config = Config.from_env()
    try:
        config.validate()
    except ConfigurationError as e:
        print(f"❌ {e}")
        print("Set it in .env file or environment variable")
        sys.exit(1)

    print(f"✓ API key found (model: {config.model})")
    print()
    print("Testing logo generation (this may take 10-30 seconds)...")

    start = time.time()
    try:
        with LogoClient.from_config(config) as client:
            logo = client.generate("a simple test logo: blue circle for a company called Circle")
    except LogogenError as e:
        print(f"❌ Generation failed: {e}")
        cause = getattr(e, "original_error", None)
        if cause is not None:
            print(f"   cause: {cause}")
        sys.exit(1)

    Path(args.output).write_bytes(logo.decode())
    print("✓ Generation successful!")
    print(f"  - Saved to: {args.output}")
    print(f"  - MIME type: {logo.mime_type}")
    print(f"  - Time: {time.time() - start:.2f}s")
    print()
    print("✅ Gemini API is working correctly.")


if __name__ == "__main__":
    main()
