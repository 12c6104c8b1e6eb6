"""
Tool discovery and registry.

ToolRegistry imports every module of the tools package, instantiates each
concrete Tool subclass defined there and indexes the instances by name.
Discovery runs once per registry: concurrent and later load_tools() calls
await the same task.
"""

import asyncio
import importlib
import inspect
import logging
import pkgutil
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Mapping, Optional

from .errors import DuplicateToolError, ToolsNotLoadedError
from .http import Fetch
from .tool_base import Tool

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "weather_mcp_server.tools"

ModuleLister = Callable[[str], Iterable[str]]


def list_package_modules(package_name: str) -> Iterable[str]:
    """Return the dotted names of all modules below a package, recursively."""
    package = importlib.import_module(package_name)
    return [
        module_info.name
        for module_info in pkgutil.walk_packages(package.__path__, prefix=f"{package_name}.")
    ]


def iter_tool_classes(module) -> Iterable[type]:
    """Yield concrete Tool subclasses defined in (not imported into) a module."""
    for _, member in inspect.getmembers(module, inspect.isclass):
        if (
            issubclass(member, Tool)
            and not inspect.isabstract(member)
            and member.__module__ == module.__name__
        ):
            yield member


class ToolRegistry:
    """
    Process-lifetime map of tool name to tool instance.

    Args:
        fetch: Optional fetch passed to every tool constructor
        module_lister: Returns module names to scan; defaults to walking
            the tools package
        package_name: Package scanned for tools
    """

    def __init__(
        self,
        fetch: Optional[Fetch] = None,
        module_lister: Optional[ModuleLister] = None,
        package_name: str = TOOLS_PACKAGE,
    ):
        self._fetch = fetch
        self._module_lister = module_lister or list_package_modules
        self._package_name = package_name
        self._tools: Optional[Mapping[str, Tool]] = None
        self._loading: Optional[asyncio.Future] = None

    async def _preload_tools(self) -> None:
        if self._tools is not None:
            return

        module_names = list(self._module_lister(self._package_name))
        tools: Dict[str, Tool] = {}

        for module_name in module_names:
            module = importlib.import_module(module_name)
            for tool_class in iter_tool_classes(module):
                instance = self._instantiate(tool_class)
                name = instance.get_name()
                if name in tools:
                    raise DuplicateToolError(
                        f'Tool name "{name}" is claimed by both '
                        f"{type(tools[name]).__qualname__} and {tool_class.__qualname__}"
                    )
                tools[name] = instance
                logger.debug(f"Registered tool '{name}' from {module_name}")
            # Let other tasks run between module imports
            await asyncio.sleep(0)

        self._tools = MappingProxyType(tools)
        logger.info(f"Loaded {len(tools)} tools: {', '.join(tools)}")

    def _instantiate(self, tool_class: type) -> Tool:
        if self._fetch is None:
            return tool_class()
        return tool_class(fetch=self._fetch)

    async def load_tools(self) -> None:
        """
        Discover and instantiate tools once.

        The first call starts discovery; every call, concurrent or later,
        awaits that same task and shares its outcome.
        """
        if self._loading is None:
            self._loading = asyncio.ensure_future(self._preload_tools())
        await asyncio.shield(self._loading)

    def get_tools_sync(self) -> Mapping[str, Tool]:
        """
        Return the read-only tool map.

        Raises:
            ToolsNotLoadedError: If load_tools() has not completed yet
        """
        if self._tools is None:
            raise ToolsNotLoadedError(
                "Tools have not been loaded yet. Call load_tools() first."
            )
        return self._tools
