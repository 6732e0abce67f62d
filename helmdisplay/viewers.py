"""Content of the UART viewer and paging of the database viewer."""

from __future__ import annotations

from .uart import MessageQueue, PeekMode

DEFAULT_ITEMS_PER_PAGE = 9
DB_VIEWER_TITLE = "DB Viewer"


def uart_viewer_header(queue: MessageQueue) -> str:
    """Heading line showing the queue's read and write indices."""
    info = queue.queue_info()
    return f"UART PORT - RdIndex={info.next_read}, WrIndex={info.next_write}"


def uart_viewer_lines(queue: MessageQueue, rows: int) -> list[str]:
    """The last ``rows`` queue slots, top row first, ending at the write slot."""
    if rows < 0:
        raise ValueError(f"rows must not be negative, got {rows}")
    lines: list[str] = []
    for position in range(rows):
        message = queue.peek(PeekMode.TAIL, rows - position - 1)
        if message is not None:
            lines.append(message)
    return lines


class DatabasePager:
    """Paging and device selection for a list of database items."""

    def __init__(
        self,
        item_count: int,
        items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
        instance_count: int = 1,
    ) -> None:
        if item_count < 1:
            raise ValueError(f"item_count must be positive, got {item_count}")
        if items_per_page < 1:
            raise ValueError(f"items_per_page must be positive, got {items_per_page}")
        if instance_count < 1:
            raise ValueError(f"instance_count must be positive, got {instance_count}")
        self._item_count = item_count
        self._per_page = items_per_page
        self._instance_count = instance_count
        self._first = 0
        self._instance = 0

    @property
    def first_item(self) -> int:
        return self._first

    @property
    def instance(self) -> int:
        return self._instance

    @property
    def page_count(self) -> int:
        return (self._item_count - 1) // self._per_page + 1

    @property
    def current_page(self) -> int:
        """One-based number of the page shown."""
        return self._first // self._per_page + 1

    def page_down(self) -> None:
        """Show the next page, wrapping to the first after the last."""
        if self._first + self._per_page < self._item_count:
            self._first += self._per_page
        else:
            self._first = 0

    def page_up(self) -> None:
        """Show the previous page, wrapping to the last before the first."""
        if self._first < self._per_page:
            self._first = (self.page_count - 1) * self._per_page
        else:
            self._first -= self._per_page

    def next_instance(self) -> None:
        """Select the next device instance, wrapping to the first."""
        if self._instance >= self._instance_count - 1:
            self._instance = 0
        else:
            self._instance += 1

    def visible_indices(self) -> range:
        """Indices of the items on the current page."""
        return range(self._first, min(self._first + self._per_page, self._item_count))

    def page_label(self) -> str:
        """Text such as ``Page 1 of 3``."""
        return f"Page {self.current_page} of {self.page_count}"

    def title(self) -> str:
        """Screen title naming the selected instance, counted from one."""
        return f"{DB_VIEWER_TITLE} ({self._instance + 1})"