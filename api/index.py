# Vercel serverless entrypoint for the Flask app
# Vercel's Python builder will use this file to serve your WSGI `app` object.

from app import create_app  # app factory from project root `app.py`

app = create_app()
