"""
Clipboard backends.

Provides a unified interface so the sink can write to the system
clipboard through pyperclip, or to anything else a caller plugs in.
"""

from abc import ABC, abstractmethod

import pyperclip


class ClipboardError(RuntimeError):
    """Raised by a backend when the text could not be placed on the clipboard."""


class BaseClipboard(ABC):
    """
    Common interface for clipboard backends.

    Subclasses must implement :meth:`copy` and expose ``backend_name``.
    """

    @abstractmethod
    def copy(self, text: str) -> None:
        """
        Place *text* on the clipboard.

        Raises:
            ClipboardError: If the backend cannot complete the write.
        """

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Human-readable backend identifier."""


class PyperclipClipboard(BaseClipboard):
    """
    System clipboard via pyperclip.

    pyperclip picks the platform mechanism (pbcopy, xclip, wl-copy,
    the Windows API, ...) on first use.
    """

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"System clipboard unavailable: {e}") from e

    @property
    def backend_name(self) -> str:
        return "pyperclip"

    def __repr__(self) -> str:
        return "PyperclipClipboard()"
