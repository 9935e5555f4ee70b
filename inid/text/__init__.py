"""Line-level text helpers for INI documents."""

from .lines import find_next_header, is_section_header, section_header_name, significant_lines

__all__ = [
    "find_next_header",
    "is_section_header",
    "section_header_name",
    "significant_lines",
]
