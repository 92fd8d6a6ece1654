"""Tool export helpers for LLM tool calling."""

from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, List, Optional, Type

from langchain_core.tools import StructuredTool
from pydantic import BaseModel

from .pagination import PaginationMetadata, format_pagination_info


def mcp_tool(
    _func: Optional[Callable[..., Any]] = None,
    *,
    name: Optional[str] = None,
    title: Optional[str] = None,
    args_schema: Optional[Type[BaseModel]] = None,
    read_only: bool = True,
    examples: Optional[List[str]] = None,
) -> Any:
    """Decorator to mark a method as an MCP-exposed tool."""

    def _decorate(func: Callable[..., Any]) -> Callable[..., Any]:
        setattr(func, "_is_mcp_tool", True)
        setattr(func, "_mcp_name", name or func.__name__)
        setattr(func, "_mcp_title", title or "")
        setattr(func, "_mcp_args_schema", args_schema)
        setattr(func, "_mcp_read_only", bool(read_only))
        setattr(func, "_mcp_examples", examples or [])
        return func

    if _func is None:
        return _decorate
    return _decorate(_func)


class ToolFeature:
    """Base for features that export decorated coroutine methods as tools."""

    def __init__(self) -> None:
        self._tools: List[StructuredTool] = []

    def get_tools(self) -> List[StructuredTool]:
        if self._tools:
            return self._tools

        tools: List[StructuredTool] = []
        for method_name in dir(self):
            method = getattr(self, method_name, None)
            if not callable(method):
                continue
            if not bool(getattr(method, "_is_mcp_tool", False)):
                continue

            tool_name = str(getattr(method, "_mcp_name", method.__name__) or method.__name__)
            doc = inspect.getdoc(method) or f"MCP tool: {tool_name}"
            examples = list(getattr(method, "_mcp_examples", []) or [])
            if examples:
                doc = f"{doc}\n\nExamples:\n" + "\n".join(f"- {x}" for x in examples)

            tools.append(
                StructuredTool.from_function(
                    name=tool_name,
                    description=doc,
                    coroutine=method,
                    args_schema=getattr(method, "_mcp_args_schema", None),
                    metadata={
                        "title": str(getattr(method, "_mcp_title", "") or tool_name),
                        "read_only": bool(getattr(method, "_mcp_read_only", True)),
                    },
                )
            )

        self._tools = tools
        return self._tools


def listing_response(log: str, metadata: PaginationMetadata) -> Dict[str, Any]:
    """Build the envelope shared by the listing tools.

    The rendered page comes first when it is non-empty; the pagination summary
    is always the last content block.
    """
    content: List[Dict[str, str]] = []
    if log:
        content.append({"type": "text", "text": log})
    content.append({"type": "text", "text": f"\n---\n{format_pagination_info(metadata)}"})
    return {
        "ok": True,
        "content": content,
        "metadata": metadata.to_dict(),
    }
