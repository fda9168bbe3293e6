#!/usr/bin/env python3
"""
Quick Start Guide for HipHTML.

Walks a small page with a cursor: locating the head and body, iterating
meta tags, and stepping through the document in order.
"""

import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hiphtml import Cursor, HipHTMLConfig, NodeKind, node_kind

PAGE = (
    "<!DOCTYPE html><html><head><title>Quick start</title>"
    '<meta charset="utf-8"><meta name="description" content="A tiny page">'
    "</head><body><h1>Hello</h1><p>First <em>paragraph</em>.</p>"
    "<!-- footer goes here --></body></html>"
)


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - HipHTML")
    print("=" * 45)

    cursor = Cursor.parse(PAGE)

    print("\nStep 1: Head and body")
    print("-" * 30)
    print(f"head at depth {cursor.head().depth}")
    print(f"body at depth {cursor.body().depth}")

    print("\nStep 2: Meta tags")
    print("-" * 30)
    result = cursor.first_meta()
    while result:
        print(f"  {dict(result.node.attrs)}")
        result = cursor.next_meta()
    print(f"search ended with: {result.condition.message}")

    print("\nStep 3: Document order")
    print("-" * 30)
    cursor.reset()
    for node in cursor.walk():
        indent = "  " * cursor.depth
        if node_kind(node) is NodeKind.ELEMENT:
            print(f"{indent}<{node.name}>")
        else:
            print(f"{indent}{node_kind(node).name.lower()}: {str(node).strip()!r}")

    print("\nStep 4: Walking back to the nearest element")
    print("-" * 30)
    result = cursor.prev_element()
    print(f"last element: <{result.node.name}> at depth {result.depth}")


def tracing_example():
    """Show per-move tracing through configuration."""

    print("\nTRACING")
    print("=" * 45)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = HipHTMLConfig().override(cursor__trace_moves=True)
    cursor = Cursor.parse("<p>traced</p>", config)
    cursor.body()


if __name__ == "__main__":
    quick_start_example()
    tracing_example()
