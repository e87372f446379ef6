"""
Practice tool registry.

Walks tools/music/ for the scale, arpeggio and progression tools and
indexes them by name for the /tools endpoints. Discovered tools are built
with the default EngineConfig; the HTTP layer rebinds them per request.
"""

import importlib
import inspect
import logging
import pkgutil

from tools.base import MusicalTool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry for all practice tools with automatic discovery.

    Tools are discovered by scanning the tools/ package for
    MusicalTool subclasses. No manual registration required.

    Usage:
        registry = ToolRegistry()
        registry.discover()  # Auto-discover all tools

        tool = registry.get("scale_exercise")
        result = tool(key="D", mode="major", octaves=2)
    """

    def __init__(self):
        self._tools: dict[str, MusicalTool] = {}

    def register(self, tool: MusicalTool) -> None:
        """
        Register a tool instance.

        Args:
            tool: MusicalTool instance to register

        Raises:
            ValueError: If tool with same name already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")

        self._tools[tool.name] = tool

    def get(self, name: str) -> MusicalTool | None:
        """
        Get tool by name.

        Args:
            name: Tool name

        Returns:
            MusicalTool instance or None if not found
        """
        return self._tools.get(name)

    def list_tools(self) -> list[dict]:
        """
        List all registered tools.

        Returns:
            List of tool dicts (name, description, parameters)
        """
        return [tool.to_dict() for tool in self._tools.values()]

    def discover(self, package_name: str = "tools") -> int:
        """
        Auto-discover all MusicalTool subclasses in package.

        Scans all modules in the package and registers MusicalTool
        subclasses defined there. Classes merely imported into a module
        are skipped so each tool registers once.

        Args:
            package_name: Package to scan (default: "tools")

        Returns:
            Number of tools discovered
        """
        count = 0

        try:
            package = importlib.import_module(package_name)
        except ImportError:
            logger.warning("Tool package '%s' could not be imported", package_name)
            return 0

        if not hasattr(package, "__path__"):
            return 0

        for _finder, module_name, _is_pkg in pkgutil.walk_packages(
            list(package.__path__), prefix=f"{package_name}."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError as exc:
                logger.warning("Skipping tool module %s: %s", module_name, exc)
                continue

            for _name, obj in inspect.getmembers(module, inspect.isclass):
                if obj is MusicalTool or obj.__module__ != module.__name__:
                    continue
                if issubclass(obj, MusicalTool) and not inspect.isabstract(obj):
                    tool_instance = obj()
                    if tool_instance.name in self._tools:
                        continue
                    self.register(tool_instance)
                    count += 1

        logger.info("Discovered %d tools in '%s'", count, package_name)
        return count

    def __len__(self) -> int:
        """Return number of registered tools."""
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        """Check if tool is registered."""
        return name in self._tools


# Global registry instance
_registry: ToolRegistry | None = None


def get_registry() -> ToolRegistry:
    """
    Get global tool registry singleton.

    Auto-discovers tools on first call.

    Returns:
        Initialized ToolRegistry
    """
    global _registry
    if _registry is None:
        _registry = ToolRegistry()
        _registry.discover()
    return _registry
