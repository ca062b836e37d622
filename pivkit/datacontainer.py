"""Image pairs of a PIV session and the vector field currently on display."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace

from .filters import VectorField

VectorReader = Callable[[int, str, int], VectorField]


@dataclass
class MetaData:
    """File names and index that belong to one image pair."""

    index: int = -1
    image_a: str = ""
    image_b: str = ""
    vector_file: str = ""

    @property
    def has_vectors(self) -> bool:
        """True if a vector file has been computed for this pair."""
        return bool(self.vector_file)


class DataContainer:
    """Ordered collection of image pairs plus the currently displayed pair.

    ``vector_reader`` loads a vector file when a pair that has one becomes
    current; it is called as ``vector_reader(index, file_name, image_height)``.
    Callbacks in ``on_images_imported`` and ``on_vector_list_updated`` are
    called with no arguments after the matching change.
    """

    def __init__(
        self,
        vector_reader: VectorReader | None = None,
        image_height: int = 0,
    ) -> None:
        self.vector_reader = vector_reader
        self.image_height = image_height
        self.on_images_imported: list[Callable[[], object]] = []
        self.on_vector_list_updated: list[Callable[[], object]] = []
        self._container: list[MetaData] = []
        self._current_index = -1
        self._is_a = True
        self._current_vectors = False
        self._current_piv_data: VectorField | None = None

    def __len__(self) -> int:
        return len(self._container)

    @property
    def current_index(self) -> int:
        """Index of the pair shown in the display, -1 if none."""
        return self._current_index

    @property
    def is_current_a(self) -> bool:
        """True if the 'A' frame of the current pair is shown."""
        return self._is_a

    @property
    def current_piv_data(self) -> VectorField | None:
        """The vector field of the current pair, if one has been set."""
        return self._current_piv_data

    def append(self, list_a: Sequence[str], list_b: Sequence[str]) -> None:
        """Add image pairs; extra names in the longer list are ignored."""
        start = len(self._container)
        for offset, (image_a, image_b) in enumerate(zip(list_a, list_b)):
            self._container.append(
                MetaData(index=start + offset, image_a=image_a, image_b=image_b)
            )
        for callback in self.on_images_imported:
            callback()

    def data(self, index: int) -> MetaData:
        """A copy of the pair at ``index``; an empty record if out of range."""
        if 0 <= index < len(self._container):
            return replace(self._container[index])
        return MetaData()

    def current_data(self) -> MetaData:
        """A copy of the pair shown in the display."""
        return self.data(self._current_index)

    def set_vector_file(self, index: int, file_name: str) -> None:
        """Associate a vector file with the pair at ``index``."""
        if not 0 <= index < len(self._container):
            raise IndexError(f"no image pair at index {index}")
        self._container[index] = replace(self._container[index], vector_file=file_name)
        for callback in self.on_vector_list_updated:
            callback()

    def set_current_index(self, index: int, is_a: bool) -> None:
        """Make a pair current, loading its vector file if it has one."""
        self._current_index = index
        self._is_a = is_a
        meta = self.data(index)
        if meta.has_vectors:
            if self.vector_reader is None:
                raise RuntimeError("no vector reader configured")
            self._current_piv_data = self.vector_reader(
                index, meta.vector_file, self.image_height
            )
            self._current_vectors = True

    def set_current_piv_data(self, piv_data: VectorField) -> None:
        """Set the vector field of the current pair."""
        self._current_piv_data = piv_data
        self._current_vectors = not piv_data.is_empty()

    def has_current_vectors(self) -> bool:
        """True if vectors are held for the pair shown in the display."""
        if self._current_piv_data is None:
            return False
        if self._current_piv_data.index != self._current_index:
            return False
        return self._current_vectors