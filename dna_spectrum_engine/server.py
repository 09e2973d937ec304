#!/usr/bin/env python
"""Development server launcher for the DNA Spectrum Engine API."""

from dna_spectrum_engine.app import create_app
from dna_spectrum_engine.core.config_loader import load_settings


def main() -> None:
    settings = load_settings()
    app = create_app(settings)
    host, port = settings.server.host, settings.server.port

    print("\n" + "=" * 60)
    print("DNA Spectrum Engine - Development Server")
    print("=" * 60)
    print(f"Running on: http://{host}:{port}")
    print(f"API Health: http://127.0.0.1:{port}/api/health")
    print("=" * 60 + "\n")
    app.run(debug=settings.server.debug, host=host, port=port, use_reloader=False, threaded=True)


if __name__ == "__main__":
    main()
