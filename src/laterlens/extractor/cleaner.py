"""
Removal of non-content subtrees (scripts, ads, navigation, widgets).
"""

from __future__ import annotations

import copy
from typing import TypeVar

import structlog
from bs4 import Tag

from .dom import class_name, element_id
from .patterns import SUSPICIOUS_PATTERNS, UNWANTED_ROLES, UNWANTED_TAGS

logger = structlog.get_logger(__name__)

NodeT = TypeVar("NodeT", bound=Tag)

# Document containers are never dropped, whatever their class says.
_PROTECTED_TAGS = frozenset({"html", "head", "body"})


class TreeCleaner:
    """Produces cleaned clones of a tree; the input node is never modified."""

    def clean(self, node: NodeT) -> NodeT:
        clone = copy.copy(node)
        removed = 0
        for element in clone.find_all(True):
            if element.decomposed:
                continue
            if self.is_unwanted(element):
                element.decompose()
                removed += 1
        logger.debug("Cleaned tree", removed_subtrees=removed)
        return clone

    def is_unwanted(self, element: Tag) -> bool:
        name = (element.name or "").lower()
        if name in _PROTECTED_TAGS:
            return False
        if name in UNWANTED_TAGS:
            return True

        classes = class_name(element).lower()
        ident = element_id(element).lower()
        if ident in UNWANTED_ROLES or any(token in UNWANTED_ROLES for token in classes.split()):
            return True

        return any(pattern.search(classes) or pattern.search(ident) for pattern in SUSPICIOUS_PATTERNS)
