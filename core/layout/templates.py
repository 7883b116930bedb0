#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Starter Templates - Pre-configured layouts with starter content.

Templates:
- Zine: A5 Booklet, Half-Letter Zine, Folded A4 Zine
- Book: Print Book, Manuscript, Trade Paperback
- Catalogue: Product Catalogue, Lookbook, Editorial Grid

Usage:
    from core.layout.templates import TemplateFactory

    template = TemplateFactory.get_template("book-print")
    content = template.starter_content

    zines = TemplateFactory.list_templates(category="zine")
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..errors import TemplateNotFoundError
from .formats import LayoutFormat


@dataclass(frozen=True)
class TemplateDefinition:
    """A starter layout the user can apply to a new document."""
    id: str
    name: str
    category: LayoutFormat
    description: str
    starter_content: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "description": self.description,
            "starter_content": self.starter_content,
        }


DEFAULT_TEMPLATES = [
    TemplateDefinition(
        id="zine-a5",
        name="A5 Booklet",
        category=LayoutFormat.ZINE,
        description="Folded A4 into A5 booklet format",
        starter_content="# A5 Booklet\n\n## Intro\n\nStart writing your zine content here.",
    ),
    TemplateDefinition(
        id="zine-half",
        name="Half-Letter Zine",
        category=LayoutFormat.ZINE,
        description="US Letter folded in half",
        starter_content="# Half-Letter Zine\n\n## Section 1\n\nAdd content for each spread.",
    ),
    TemplateDefinition(
        id="zine-folded",
        name="Folded A4 Zine",
        category=LayoutFormat.ZINE,
        description="Classic folded zine layout",
        starter_content="# Folded A4 Zine\n\n## Cover\n\nAdd cover text and intro copy.",
    ),
    TemplateDefinition(
        id="book-print",
        name="Print Book",
        category=LayoutFormat.BOOK,
        description="Standard print book with margins",
        starter_content="# Print Book\n\n## Chapter 1\n\nWrite the opening chapter.",
    ),
    TemplateDefinition(
        id="book-manuscript",
        name="Manuscript",
        category=LayoutFormat.BOOK,
        description="Double-spaced manuscript format",
        starter_content="# Manuscript Draft\n\n## Chapter 1\n\nBegin your manuscript draft.",
    ),
    TemplateDefinition(
        id="book-trade",
        name="Trade Paperback",
        category=LayoutFormat.BOOK,
        description="6x9 trade paperback format",
        starter_content="# Trade Paperback\n\n## Front Matter\n\nSubtitle, author, and opening text.",
    ),
    TemplateDefinition(
        id="cat-product",
        name="Product Catalogue",
        category=LayoutFormat.CATALOGUE,
        description="Grid-based product showcase",
        starter_content="# Product Catalogue\n\n## Featured Items\n\n- Item A\n- Item B\n- Item C",
    ),
    TemplateDefinition(
        id="cat-lookbook",
        name="Lookbook",
        category=LayoutFormat.CATALOGUE,
        description="Fashion and photography layout",
        starter_content="# Lookbook\n\n## Collection\n\nAdd image pages and captions.",
    ),
    TemplateDefinition(
        id="cat-editorial",
        name="Editorial Grid",
        category=LayoutFormat.CATALOGUE,
        description="Magazine-style editorial layout",
        starter_content="# Editorial Grid\n\n## Story\n\nAdd editorial content and visuals.",
    ),
]


class TemplateFactory:
    """
    Registry of starter templates.

    Provides:
    - Template registration and retrieval
    - Listing templates, optionally per category

    Usage:
        template = TemplateFactory.get_template("zine-a5")
        names = [t.name for t in TemplateFactory.list_templates()]
    """

    _templates: Dict[str, TemplateDefinition] = {}
    _initialized: bool = False

    @classmethod
    def _ensure_initialized(cls):
        """Ensure default templates are registered."""
        if not cls._initialized:
            for template in DEFAULT_TEMPLATES:
                cls._templates[template.id] = template
            cls._initialized = True

    @classmethod
    def register(cls, template: TemplateDefinition):
        """
        Register a template, replacing any with the same id.

        Args:
            template: Template definition to register
        """
        cls._ensure_initialized()
        cls._templates[template.id] = template

    @classmethod
    def unregister(cls, template_id: str):
        cls._ensure_initialized()
        cls._templates.pop(template_id, None)

    @classmethod
    def get_template(cls, template_id: str) -> TemplateDefinition:
        """
        Get template by id.

        Raises:
            TemplateNotFoundError: If template not found
        """
        cls._ensure_initialized()
        if template_id not in cls._templates:
            raise TemplateNotFoundError(template_id, cls._templates.keys())
        return cls._templates[template_id]

    @classmethod
    def list_templates(cls, category: Optional[LayoutFormat] = None) -> List[TemplateDefinition]:
        """
        List templates in registration order.

        Args:
            category: Only return templates of this format.
        """
        cls._ensure_initialized()
        templates = list(cls._templates.values())
        if category is not None:
            category = LayoutFormat(category)
            templates = [t for t in templates if t.category is category]
        return templates

    @classmethod
    def reset(cls):
        """Drop custom registrations (used by tests)."""
        cls._templates = {}
        cls._initialized = False
