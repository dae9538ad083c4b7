"""Read Doxygen XML markup, print it as plain text or Markdown, and render pages from templates."""

__version__ = "0.1.0"

__all__ = [
    "log",
    "renderer",
    "text_markdown_printer",
    "text_plain_printer",
    "utils",
    "xml",
    "xml_text_parser",
]