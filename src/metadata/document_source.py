"""Deferred loading of EDM metadata XML documents."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import IO, Callable, Optional, Union

from ..utils.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


class DocumentSource:
    """A parsed XML tree that is loaded on first access and then cached.

    Use one of the ``from_*`` constructors. The loader runs at most once; a
    failed load is not cached, so reading ``root`` again retries it.
    """

    def __init__(self, loader: Callable[[], ET.Element], origin: str) -> None:
        self._loader = loader
        self._root: Optional[ET.Element] = None
        self.origin = origin

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "DocumentSource":
        path = Path(file_path)
        return cls(lambda: ET.parse(path).getroot(), origin=str(path))

    @classmethod
    def from_string(cls, xml_data: Union[str, bytes]) -> "DocumentSource":
        return cls(lambda: ET.fromstring(xml_data), origin="<string>")

    @classmethod
    def from_stream(cls, xml_stream: IO) -> "DocumentSource":
        return cls(lambda: ET.parse(xml_stream).getroot(), origin="<stream>")

    @property
    def is_loaded(self) -> bool:
        return self._root is not None

    @property
    def root(self) -> ET.Element:
        if self._root is None:
            try:
                self._root = self._loader()
            except (ET.ParseError, OSError) as exc:
                raise DocumentLoadError(
                    f"Failed to load EDM document from {self.origin}: {exc}"
                ) from exc
            logger.info("Loaded EDM document from %s", self.origin)
        return self._root
