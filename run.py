#!/usr/bin/env python3
"""A development server launcher for TransformerForge.

Usage:
    python run.py

Sets development defaults in the environment and starts uvicorn with hot
reloading.
"""

import os
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()


def print_startup_info(settings):
    """Prints a banner with the development endpoints."""
    host_display = "localhost" if settings.server.host == "0.0.0.0" else settings.server.host
    base_url = f"http://{host_display}:{settings.server.port}"

    print(f"{settings.server.app_name} {settings.server.app_version}")
    print("=" * 50)
    print(f"Project Directory: {project_root}")
    print(f"Mode: {'Debug' if settings.server.debug else 'Production'}")
    print(f"Log Level: {settings.monitoring.log_level}")
    print(f"Default Model: {settings.models.default_model}")
    print()
    print("Available Endpoints:")
    print(f"  API Docs:      {base_url}/docs")
    print(f"  Health Check:  {base_url}/health")
    print(f"  Predict:       {base_url}/predict")
    print(f"  Batch Predict: {base_url}/predict/batch")
    print(f"  Metrics:       {base_url}/metrics/prometheus")
    print("=" * 50)


if __name__ == "__main__":
    os.environ.setdefault("FORGE_DEBUG", "true")
    os.environ.setdefault("FORGE_LOG_LEVEL", "INFO")
    os.environ.setdefault("FORGE_LOG_FORMAT", "console")

    try:
        import uvicorn

        from forge.core.config import get_settings

        settings = get_settings()
        print_startup_info(settings)

        uvicorn.run(
            "forge.main:app",
            host=settings.server.host,
            port=settings.server.port,
            log_level=settings.monitoring.log_level.lower(),
            reload=settings.server.debug,
            reload_dirs=[str(project_root / "forge")],
        )
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    except ImportError as e:
        print(f"Import Error: {e}")
        print("Install the package first: pip install -e '.[ml]'")
        sys.exit(1)
