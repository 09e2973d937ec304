"""
WSGI entry point for Gunicorn deployment.

    gunicorn dna_spectrum_engine.wsgi:app
"""

from dna_spectrum_engine.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
