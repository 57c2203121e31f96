"""Domain Types — collections, program languages and thumbnail bounds.

Invariants:
    - Thumbnail indices are 0 <= index < THUMBNAIL_COUNT
    - Every Language has default starter code
"""

from enum import Enum


THUMBNAIL_COUNT = 50


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """Document collections, mapped to the `collection` column."""
    USERS = "users"
    CLASSES = "classes"
    PROGRAMS = "programs"


class Language(str, Enum):
    """Languages a program can be written in."""
    PYTHON = "python"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    HTML = "html"
    PROCESSING = "processing"


DEFAULT_CODE: dict[Language, str] = {
    Language.PYTHON: 'print("Hello, world!")\n',
    Language.JAVA: (
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        '        System.out.println("Hello, world!");\n'
        "    }\n"
        "}\n"
    ),
    Language.JAVASCRIPT: 'console.log("Hello, world!");\n',
    Language.HTML: (
        "<!DOCTYPE html>\n<html>\n  <body>\n"
        "    <h1>Hello, world!</h1>\n"
        "  </body>\n</html>\n"
    ),
    Language.PROCESSING: (
        "void setup() {\n  size(400, 400);\n}\n\n"
        "void draw() {\n  background(255);\n}\n"
    ),
}


def thumbnail_in_range(index: int) -> bool:
    return 0 <= index < THUMBNAIL_COUNT
