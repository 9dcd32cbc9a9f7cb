# homework_diary/adapters/api/__init__.py
"""
HTTP delivery adapter (FastAPI).

Exposes the sentence formatter to the client-side image renderer so it
shares the server's single implementation.
"""
