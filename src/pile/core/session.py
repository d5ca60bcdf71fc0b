"""Interactive deletion session."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pile.core.chart_data import build_slices, page_slots
from pile.models.candidate import CandidateFile, ScanResult
from pile.models.chart_slice import ChartSlice

log = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 5

# Asks the operator and deletes; returns False when declined, raises OSError on failure
ConfirmDelete = Callable[[Path], bool]
MessageCallback = Callable[[str, str], None]  # (level, message)
CommandReader = Callable[[], str]
ChartRenderer = Callable[[list[ChartSlice]], None]


class Command(Enum):
    NEXT_PAGE = "n"
    QUIT = "q"
    DELETE = "delete"
    INVALID = "invalid"


def parse_command(line: str) -> tuple[Command, int | None]:
    """Interpret one line of operator input.

    Returns the command and, for DELETE, the slot number as typed.
    """
    choice = line.strip().lower()
    match choice:
        case "n":
            return Command.NEXT_PAGE, None
        case "q":
            return Command.QUIT, None
    if choice.isascii() and choice.isdecimal():
        return Command.DELETE, int(choice)
    return Command.INVALID, None


class DeletionSession:
    """Pages through ranked candidates and deletes them on request.

    The candidate list is never modified. Deleted files are tracked as a set
    of slot indices on the current page, cleared whenever the page advances,
    while ``live_total`` drops by each deleted file's size.
    """

    def __init__(
        self,
        scan_result: ScanResult,
        confirm_delete: ConfirmDelete,
        page_size: int = DEFAULT_PAGE_SIZE,
        on_message: MessageCallback | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError(f"page size must be at least 1, got {page_size}")
        self.candidates: tuple[CandidateFile, ...] = tuple(scan_result.candidates)
        self.scan_total = scan_result.total_bytes
        self.page_size = page_size
        self.offset = 0
        self.deleted: set[int] = set()
        self.live_total = scan_result.total_bytes
        self.done = False
        self.files_removed = 0
        self._confirm_delete = confirm_delete
        self._on_message = on_message

    @property
    def freed_bytes(self) -> int:
        """Bytes freed so far in this session."""
        return self.scan_total - self.live_total

    @property
    def page(self) -> list[CandidateFile]:
        return page_slots(self.candidates, self.offset, self.page_size)

    @property
    def has_next_page(self) -> bool:
        return self.offset + self.page_size < len(self.candidates)

    @property
    def exhausted(self) -> bool:
        """Whether nothing is left to show."""
        if self.live_total <= 0:
            return True
        page_left = any(i not in self.deleted for i in range(len(self.page)))
        return not page_left and not self.has_next_page

    def slices(self) -> list[ChartSlice]:
        """Chart data for the current state."""
        return build_slices(self.candidates, self.offset, self.live_total, self.deleted, self.page_size)

    def check_exhausted(self) -> bool:
        """Finish the session if there is nothing left; return whether done."""
        if not self.done and self.exhausted:
            self._finish("No files left, quitting.")
        return self.done

    def handle(self, line: str) -> None:
        """Apply one operator command."""
        command, slot = parse_command(line)
        match command:
            case Command.NEXT_PAGE:
                self.next_page()
            case Command.QUIT:
                self.quit()
            case Command.DELETE:
                self.delete(slot)
            case _:
                self._emit("error", "Not a valid number")

    def next_page(self) -> None:
        if not self.has_next_page:
            self._finish("No files left, quitting.")
            return
        self.offset += self.page_size
        self.deleted.clear()
        log.debug("Advanced to offset %d", self.offset)

    def quit(self) -> None:
        self._finish()

    def delete(self, slot: int) -> None:
        """Delete the file in 1-based *slot* of the current page."""
        index = slot - 1
        if not 0 <= index < len(self.page) or index in self.deleted:
            self._emit("error", "Invalid choice")
            return

        candidate = self.page[index]
        try:
            removed = self._confirm_delete(candidate.path)
        except OSError as e:
            log.debug("Deleting %s failed: %s", candidate.path, e)
            self._emit("error", f"Couldn't delete file: {e}")
            return
        if not removed:
            return

        self.deleted.add(index)
        self.live_total -= candidate.size_bytes
        self.files_removed += 1
        log.debug("Deleted %s (%d bytes), live total %d", candidate.path, candidate.size_bytes, self.live_total)

    def run(self, read_command: CommandReader, render: ChartRenderer) -> None:
        """Render, read a command and apply it until the session is done."""
        while not self.check_exhausted():
            render(self.slices())
            self.handle(read_command())

    def _finish(self, message: str | None = None) -> None:
        self.done = True
        if message:
            self._emit("info", message)

    def _emit(self, level: str, message: str) -> None:
        if self._on_message:
            self._on_message(level, message)
