"""Shared schemas for bartender."""

from bartender.schemas.sidebar import Category, DocRef, NavigationNode, SidebarMap

__all__ = ["Category", "DocRef", "NavigationNode", "SidebarMap"]
