from .layout import ForceLayout, GraphLayout, LayoutLink, LayoutNode, build_layout

__all__ = ["ForceLayout", "GraphLayout", "LayoutLink", "LayoutNode", "build_layout"]
