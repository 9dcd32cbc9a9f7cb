# tests/__init__.py
"""
Test Suite for the Homework Diary.

Organization:
- `core`: Domain (formatter, language packs) and Use Cases with mocked ports.
- `adapters`: Font catalog on a temp directory, HTTP API via TestClient.
- top level: API smoke tests and the CLI.
"""
