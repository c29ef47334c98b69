"""
Demo script for the Epub builder.
This script builds a small two-chapter book and writes it to temp/demo.epub.
"""

import json
import logging
import os
import sys
from pathlib import Path

sys.path.append(os.path.abspath(os.path.join(__file__, "..")))

from epub_writer import Epub, NavigationPosition, TextMediaType

_CHAPTER_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE html>
<html xmlns="http://www.w3.org/1999/xhtml">
<head>
  <title>{title}</title>
  <link rel="stylesheet" type="text/css" href="style.css"/>
</head>
<body>
  <h1>{title}</h1>
  <p>{text}</p>
</body>
</html>
"""


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s    %(message)s", datefmt="%H:%M:%S")
    print("=" * 60)
    print("Epub Demo - Building a book in memory")
    print("=" * 60)

    config = _read_book_json()
    print(f"\n✓ Loaded configuration: {config['title']} ({config['language']})")

    output_path = Path("temp") / "demo.epub"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with Epub(config["language"], config["title"], config.get("author")) as epub:
        epub.add_text_file("style.css", "body { font-family: serif; }", TextMediaType.CSS)
        for i, text in enumerate(config["chapters"], start=1):
            title = f"Chapter {i}"
            content = _CHAPTER_TEMPLATE.format(title=title, text=text)
            item_id = epub.add_text_file(f"chapter{i}.xhtml", content, TextMediaType.XHTML)
            epub.add_spine(item_id, title)
        print(f"✓ Added {len(config['chapters'])} chapters")

        epub.set_navigation(NavigationPosition.FIRST_CHAPTER)
        epub.save(output_path)

    print(f"\n✓ Saved to {output_path}")


def _read_book_json() -> dict:
    """Read book.json from the project root, falling back to a built-in sample."""
    path = Path(__file__).parent / "book.json"
    if not path.exists():
        return {
            "language": "en-us",
            "title": "My Book",
            "author": "Jane Doe",
            "chapters": [
                "It was a dark and stormy night.",
                "The storm passed before morning.",
            ],
        }
    with open(path, encoding="utf-8") as file:
        return json.load(file)


if __name__ == "__main__":
    main()
