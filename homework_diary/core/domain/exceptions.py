# homework_diary/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Registry Errors ---

class LanguagePackNotFoundError(DomainError):
    """Raised when no language pack is registered for a language."""
    def __init__(self, language: str):
        super().__init__(f"No language pack registered for '{language}'.")

class DuplicateLanguagePackError(DomainError):
    """Raised when a second pack is registered for the same language."""
    def __init__(self, language: str):
        super().__init__(f"A language pack for '{language}' is already registered.")
