"""
Small helpers over BeautifulSoup trees and their text.
"""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup, Tag

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def parse_html(html: str, parser: str = "html.parser") -> BeautifulSoup:
    return BeautifulSoup(html, parser)


def node_text(node: Tag) -> str:
    """Concatenated text of a node, like the DOM's textContent."""
    return node.get_text()


def text_length(node: Tag) -> int:
    return len(node.get_text().strip())


def html_length(node: Tag) -> int:
    """Length of the node's inner markup."""
    return len(node.decode_contents())


def class_name(node: Tag) -> str:
    classes = node.get("class") or []
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def element_id(node: Tag) -> str:
    value = node.get("id") or ""
    return value if isinstance(value, str) else " ".join(value)


def count(node: Tag, *names: str) -> int:
    return len(node.find_all(list(names)))


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def count_words(text: str) -> int:
    return len(text.split())


def split_sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]
