from dataclasses import dataclass, field
from typing import List

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
BLANK = "    "


@dataclass
class TreeNode:
    label: str
    children: List["TreeNode"] = field(default_factory=list)


def _render_children(node: TreeNode, prefix: str) -> List[str]:
    lines = []
    for index, child in enumerate(node.children):
        lines.extend(render_tree(child, prefix, index == len(node.children) - 1))
    return lines


def render_tree(node: TreeNode, prefix: str = "", is_last: bool = True) -> List[str]:
    """Render ``node`` and its descendants as box-drawing lines.

    ``prefix`` is the continuation text inherited from the ancestors. The last
    sibling gets a terminal branch and leaves blank space below it; any other
    sibling keeps a vertical rule running for the siblings that follow.
    """
    lines = [f"{prefix}{LAST_BRANCH if is_last else BRANCH}{node.label}"]
    lines.extend(_render_children(node, prefix + (BLANK if is_last else PIPE)))
    return lines


def format_tree(root: TreeNode) -> str:
    """Root label followed by its rendered descendants, one per line."""
    return "\n".join([root.label, *_render_children(root, "")])
