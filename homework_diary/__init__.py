# homework_diary/__init__.py
"""
Homework Diary - activity sentence service.

Turns structured homework rows (activity type, source, chapter, page,
description, subject) into one display-ready sentence in English, Telugu
or Hindi. The same formatter backs the PDF exporter, the image renderer
(over HTTP) and the command line.
"""

__version__ = "1.0.0"
