# homework_diary/core/domain/__init__.py
"""
Domain Entities, Value Objects and the sentence formatter.

`formatter` holds the entry points renderers call; `packs` holds the
per-language vocabulary; `sentence_builder` the single algorithm that
combines them. Nothing here touches infrastructure.
"""
