#!/usr/bin/env python3
"""Report which optimization path the service will use with the current environment."""

from pathlib import Path
import os
import sys

ENV_TEMPLATE = """# Google Maps Directions API (optional)
# Without a key every optimization uses the simulated estimator.
GOOGLE_MAPS_API_KEY=

# API Configuration
ECOROUTE_API_PREFIX=/api
ECOROUTE_LOG_LEVEL=INFO
ECOROUTE_SEED_SAMPLE_DATA=true
ECOROUTE_PROVIDER_TIMEOUT_SECONDS=10
"""


def _mask(value: str) -> str:
    return value[:6] + "..." + value[-4:] if len(value) > 12 else "***"


def main() -> int:
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("EcoRoute environment checker")
    print("=" * 60)

    if env_file.exists():
        print(f"Found .env file at: {env_file}")
    else:
        env_file.write_text(ENV_TEMPLATE, encoding="utf-8")
        print(f"Created template .env file at: {env_file}")

    sys.path.insert(0, str(project_root / "src"))
    try:
        from ecoroute.config import Settings
    except ImportError as e:
        print(f"Error importing configuration: {e}")
        print("Run this from the project root after installing the dependencies.")
        return 1

    config = Settings()
    print(f"API prefix:       {config.api_prefix}")
    print(f"Log level:        {config.log_level}")
    print(f"Seed sample data: {config.seed_sample_data}")
    print(f"Provider timeout: {config.provider_timeout_seconds}s")
    print()

    if config.google_maps_api_key:
        print(f"Google Maps API key: {_mask(config.google_maps_api_key)}")
        print("Optimizations will call the Directions API and fall back on failure.")
    else:
        source = "environment" if os.getenv("GOOGLE_MAPS_API_KEY") is not None else ".env / defaults"
        print(f"Google Maps API key not set ({source}).")
        print("Optimizations will use the simulated estimator (usesFallback=true).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
