"""
Tool base class and common types.

All practice tools inherit from MusicalTool and implement execute().
This gives the registry, the HTTP layer and any caller one calling
convention: keyword arguments in, ToolResult out, never an exception.
"""

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from core.config import DEFAULT_ENGINE_CONFIG, EngineConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolParameter:
    """
    Tool parameter specification.

    Attributes:
        name: Parameter name
        type: Python type (str, int, ...)
        description: Human-readable description
        required: Whether parameter is required
        default: Default value if not required
        choices: Allowed values; empty means any value of the right type
    """

    name: str
    type: type
    description: str
    required: bool = True
    default: Any = None
    choices: tuple[Any, ...] = ()

    def validate(self, value: Any) -> tuple[bool, str | None]:
        """
        Validate parameter value.

        Args:
            value: Value to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            if self.required:
                return False, f"Required parameter '{self.name}' is missing"
            return True, None

        # bool is an int subclass; an octave count of True is a caller bug
        if not isinstance(value, self.type) or (self.type is int and isinstance(value, bool)):
            return (
                False,
                f"Parameter '{self.name}' must be {self.type.__name__}, got {type(value).__name__}",
            )

        if self.choices and value not in self.choices:
            allowed = ", ".join(str(c) for c in self.choices)
            return False, f"Parameter '{self.name}' must be one of: {allowed}. Got: {value!r}"

        return True, None


@dataclass(frozen=True)
class ToolResult:
    """
    Result from tool execution.

    Attributes:
        success: Whether execution succeeded
        data: Result data (dict, list, str, etc.)
        error: Error message if success=False
        metadata: Optional metadata (fallbacks applied, sizes, ...)
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class MusicalTool(ABC):
    """
    Abstract base class for all practice tools.

    Practice tools are deterministic wrappers around the theory engine:
    they validate enumerated inputs, call core functions and shape the
    result for JSON consumers.

    Subclasses must implement:
        - name: Unique tool identifier
        - description: What the tool returns and when to use it
        - parameters: List of ToolParameter specs
        - execute(): Core tool logic

    Example:
        class ScaleExercise(MusicalTool):
            @property
            def name(self) -> str:
                return "scale_exercise"

            def execute(self, **kwargs) -> ToolResult:
                return ToolResult(success=True, data={"notes": [...]})

    Every tool carries an ``EngineConfig`` (pitch window, start octave).
    The registry builds tools with the default config; callers that hold
    another one use ``with_config()``.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_ENGINE_CONFIG

    def with_config(self, config: EngineConfig) -> "MusicalTool":
        """Return a copy of this tool that uses ``config``."""
        bound = copy.copy(self)
        bound.config = config
        return bound

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool identifier (lowercase, underscores)."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the tool's output."""
        pass

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]:
        """
        List of parameters this tool accepts.

        Order matters — positional parameters come first.
        """
        pass

    def validate_inputs(self, **kwargs) -> tuple[bool, str | None]:
        """
        Validate all input parameters.

        Args:
            **kwargs: Parameter values to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        for param in self.parameters:
            value = kwargs.get(param.name)
            is_valid, error = param.validate(value)
            if not is_valid:
                return False, error

        return True, None

    def with_defaults(self, **kwargs) -> dict[str, Any]:
        """Return kwargs with every missing optional parameter set to its default."""
        resolved = dict(kwargs)
        for param in self.parameters:
            if resolved.get(param.name) is None and not param.required:
                resolved[param.name] = param.default
        return resolved

    @abstractmethod
    def execute(self, **kwargs) -> ToolResult:
        """
        Execute tool with validated parameters.

        Args:
            **kwargs: Tool parameters (already validated, defaults applied)

        Returns:
            ToolResult with success status and data
        """
        pass

    def __call__(self, **kwargs) -> ToolResult:
        """
        Execute tool with automatic validation.

        This is the main entry point — validates inputs, fills defaults,
        then calls execute().

        Args:
            **kwargs: Tool parameters

        Returns:
            ToolResult (error if validation or execution fails)
        """
        is_valid, error = self.validate_inputs(**kwargs)
        if not is_valid:
            return ToolResult(success=False, error=error)

        try:
            return self.execute(**self.with_defaults(**kwargs))
        except ValueError as e:
            logger.warning("Tool '%s' rejected input: %s", self.name, e)
            return ToolResult(success=False, error=f"Tool execution failed: {str(e)}")
        except Exception as e:
            logger.exception("Tool '%s' failed", self.name)
            return ToolResult(success=False, error=f"Tool execution failed: {str(e)}")

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize tool for API consumption.

        Returns dict with name, description, parameters.
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type.__name__,
                    "description": p.description,
                    "required": p.required,
                    "default": p.default,
                    "choices": list(p.choices),
                }
                for p in self.parameters
            ],
        }
