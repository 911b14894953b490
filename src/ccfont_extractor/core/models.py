"""Data models for a single extraction run."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .exceptions import InvalidStateTransitionError


class FontFileStatus(Enum):
    """Processing state of one cached font file."""

    DISCOVERED = "discovered"
    NAME_RESOLVED = "name_resolved"
    COPIED = "copied"
    SKIPPED_DRY_RUN = "skipped_dry_run"
    REPORTED = "reported"
    FAILED = "failed"


_TRANSITIONS: dict[FontFileStatus, frozenset[FontFileStatus]] = {
    FontFileStatus.DISCOVERED: frozenset({FontFileStatus.NAME_RESOLVED, FontFileStatus.FAILED}),
    FontFileStatus.NAME_RESOLVED: frozenset(
        {FontFileStatus.COPIED, FontFileStatus.SKIPPED_DRY_RUN, FontFileStatus.FAILED}
    ),
    FontFileStatus.COPIED: frozenset({FontFileStatus.REPORTED}),
    FontFileStatus.SKIPPED_DRY_RUN: frozenset({FontFileStatus.REPORTED}),
    FontFileStatus.REPORTED: frozenset(),
    FontFileStatus.FAILED: frozenset(),
}


@dataclass
class FontFileRecord:
    """A cached font file and what happened to it during the run."""

    source_path: Path
    family_name: str | None = None
    destination_path: Path | None = None
    status: FontFileStatus = FontFileStatus.DISCOVERED
    error: Exception | None = None
    copied: bool = False

    @property
    def source_name(self) -> str:
        """Get the obfuscated cache file name."""
        return self.source_path.name

    @property
    def destination_name(self) -> str | None:
        """Get the file name the font is (or would be) copied to."""
        if self.destination_path is None:
            return None
        return self.destination_path.name

    @property
    def succeeded(self) -> bool:
        return self.status is FontFileStatus.REPORTED

    def transition(self, target: FontFileStatus) -> None:
        """Move to ``target``, rejecting transitions the pipeline never makes."""
        if target not in _TRANSITIONS[self.status]:
            raise InvalidStateTransitionError(self.status.value, target.value)
        self.status = target

    def fail(self, error: Exception) -> None:
        self.transition(FontFileStatus.FAILED)
        self.error = error

    def mapping_line(self) -> str:
        """Format the ``<cache name>\\t->\\t<font name>`` output line."""
        if self.destination_name is None:
            raise InvalidStateTransitionError(self.status.value, "reported")
        return f"{self.source_name}\t->\t{self.destination_name}"

    def __str__(self) -> str:
        return f"{self.source_name} ({self.status.value})"


@dataclass
class ExtractionResult:
    """Outcome of one extraction run."""

    cache_directory: Path
    output_directory: Path
    dry_run: bool = False
    output_directory_created: bool = False
    records: list[FontFileRecord] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.records)

    @property
    def successful_files(self) -> int:
        return sum(1 for record in self.records if record.succeeded)

    @property
    def failed_files(self) -> int:
        return sum(1 for record in self.records if record.status is FontFileStatus.FAILED)

    @property
    def has_failures(self) -> bool:
        return self.failed_files > 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_files == 0:
            return 100.0
        return (self.successful_files / self.total_files) * 100.0

    def failed_records(self) -> list[FontFileRecord]:
        """Get the records that ended in the failed state."""
        return [record for record in self.records if record.status is FontFileStatus.FAILED]
