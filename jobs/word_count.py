"""
Word count task — counts words, lines, and characters.

Takes either inline text or a path to a UTF-8 text file:
    {"text": "hello world"}
    {"file_path": "/tmp/notes.txt"}

If both are given, "text" wins.
"""

import os

from jobs.base import AbstractTaskHandler


class WordCountTask(AbstractTaskHandler):

    def run(self, params: dict) -> dict:
        text = params.get("text")
        file_path = params.get("file_path")

        if text is None:
            if not file_path:
                raise ValueError("Missing 'text' or 'file_path' in params")
            if not os.path.exists(file_path):
                raise FileNotFoundError(f"File not found: {file_path}")
            with open(file_path, "r", encoding="utf-8") as f:
                text = f.read()
            source = file_path
        else:
            source = "<text>"

        words = len(text.split())
        lines = text.count("\n") + (1 if text and not text.endswith("\n") else 0)
        chars = len(text)

        return {
            "source": source,
            "word_count": words,
            "line_count": lines,
            "char_count": chars,
        }

    @property
    def task_type(self) -> str:
        return "word_count"
