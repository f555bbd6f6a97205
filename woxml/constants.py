from typing import ClassVar


class Defaults:
    MODE = "compact"
    VERBOSITY = 0
    CONFIG_FILE = "woxml.toml"
    ENCODING = "utf-8"


class Markup:
    INDENT_UNIT = "  "
    NEWLINE = "\n"
    DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
    CDATA_OPEN = "<![CDATA["
    CDATA_CLOSE = "]]>"
    COMMENT_OPEN = "<!-- "
    COMMENT_CLOSE = " -->"
    XMLNS = "xmlns"


class Entities:
    PREDEFINED: ClassVar[dict[str, str]] = {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&apos;",
    }


class EnvVars:
    MODE = "WOXML_MODE"
    VERBOSITY = "WOXML_VERBOSITY"


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
