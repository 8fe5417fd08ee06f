from __future__ import annotations


class DeployError(RuntimeError):
    """Base class for failures that abort an action with exit status 1."""


class ToolMissingError(DeployError):
    """Raised when a required command line tool is not installed."""


class FetchError(DeployError):
    """Raised when the application source cannot be cloned."""


class BuildError(DeployError):
    """Raised when Maven fails or produces no runnable jar."""


class EngineError(DeployError):
    """Raised when a docker pull / compose build / compose up step fails."""
