#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2view library.

This module defines specialized exception classes for the error conditions
that can surface around a render pass. The render pass itself never raises
for malformed input: bad nodes are dropped, unknown kinds are skipped and
classification ambiguity resolves conservatively. These exceptions cover
configuration, parsing and opt-in strictness.

Exception Hierarchy
-------------------
- Md2ViewError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - ParsingError (Markdown source parsing failures)

  - RenderingError (presentation tree generation failures)
    - RenderDepthError (nesting deeper than the configured limit)

  - StyleConfigError (unreadable or malformed style override files)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2ViewError(Exception):
    """Base exception class for all md2view-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2ViewError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2ViewError):
    """Exception raised when Markdown source cannot be turned into a syntax tree.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage where parsing failed (e.g., "block", "inline")
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2ViewError):
    """Exception raised when presentation tree generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage where rendering failed
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class RenderDepthError(RenderingError):
    """Exception raised when document nesting exceeds the configured depth limit.

    Only raised when ``fail_on_depth_exceeded`` is enabled; by default the
    over-deep subtree is dropped and a warning is logged.

    Parameters
    ----------
    max_depth : int
        The configured limit
    key : str
        Render key of the node that crossed the limit

    """

    def __init__(self, max_depth: int, key: str, message: str | None = None):
        """Initialize the depth error with the limit and offending key."""
        if message is None:
            message = f"Document nesting exceeds max_depth={max_depth} at node '{key}'"
        super().__init__(message, rendering_stage="dispatch")
        self.max_depth = max_depth
        self.key = key


class StyleConfigError(Md2ViewError):
    """Exception raised for unreadable or malformed style override files.

    Parameters
    ----------
    message : str
        Description of the problem
    file_path : str, optional
        Path to the offending file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the style config error with file information."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class DependencyError(Md2ViewError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    feature_name : str
        Name of the feature requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[tuple[str, str]],
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.original_import_error = original_import_error
        if message is None:
            pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in missing_packages)
            if packages_str:
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
