# matswap/layout/registry.py
import logging
import threading
from typing import Iterable, Iterator, List, Sequence, overload

from matswap.layout.types import BufferLayout

logger = logging.getLogger(__name__)


class LayoutTable:
    """
    The container's global, order-stable list of buffer layouts.

    Entries are only ever appended, never removed or reordered, so every
    index handed out by `resolve` stays valid for the whole session.
    """

    def __init__(self, layouts: Iterable[BufferLayout] = ()) -> None:
        self._layouts: List[BufferLayout] = list(layouts)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._layouts)

    def __iter__(self) -> Iterator[BufferLayout]:
        return iter(self._layouts)

    @overload
    def __getitem__(self, index: int) -> BufferLayout: ...
    @overload
    def __getitem__(self, index: slice) -> List[BufferLayout]: ...

    def __getitem__(self, index):
        return self._layouts[index]

    def __contains__(self, layout: object) -> bool:
        return layout in self._layouts

    def __repr__(self) -> str:
        return f"LayoutTable({len(self._layouts)} layouts)"

    def _append(self, layout: BufferLayout) -> int:
        """Append under the caller's lock and return the new index."""
        self._layouts.append(layout)
        return len(self._layouts) - 1

    def resolve(self, layout_set: Sequence[BufferLayout]) -> List[int]:
        """
        Map each target layout to a table index, appending unseen ones.

        The returned list has the same length and order as `layout_set`.
        Matching is by structural equality and always picks the
        lowest-indexed equal entry. Appended layouts are stored by
        reference, not copied.
        """
        with self._lock:
            indices: List[int] = []
            for target in layout_set:
                if not self._layouts:
                    indices.append(self._append(target))
                    logger.debug("Layout table empty, added layout #0")
                    continue

                for i, layout in enumerate(self._layouts):
                    if layout == target:
                        indices.append(i)
                        break
                else:
                    index = self._append(target)
                    indices.append(index)
                    logger.debug(
                        "No matching layout (%d members), added layout #%d",
                        len(target),
                        index,
                    )

            return indices


def resolve_layout_indices(
    table: LayoutTable, layout_set: Sequence[BufferLayout]
) -> List[int]:
    """Resolve `layout_set` against `table`; see `LayoutTable.resolve`."""
    return table.resolve(layout_set)
