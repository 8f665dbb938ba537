"""Sidebar tree models."""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field


class DocRef(BaseModel):
    """A reference to a single content file."""

    type: Literal["doc"] = "doc"
    id: str


class Category(BaseModel):
    """A group of sidebar items, optionally linked to an overview doc.

    Field order matches the order keys are written to the sidebars module.
    """

    type: Literal["category"] = "category"
    label: str
    link: DocRef | None = None
    description: str | None = None
    items: list[Union["Category", DocRef]] = Field(default_factory=list)


NavigationNode = Union[Category, DocRef]

SidebarMap = dict[str, list[Category]]
