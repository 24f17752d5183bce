"""Friendship dataset loading.

Reads the per-user record file and builds a frozen GraphStore from it.
Each line holds one user followed by that user's friends::

    alice,bob;carol
    bob,alice
    dave,

A record without friends still registers its user.
"""

from collections.abc import Iterable, Iterator
from pathlib import Path

from social_graph.config import DatasetSettings
from social_graph.core.exceptions import (
    DatasetDecodeError,
    DatasetNotFoundError,
    DatasetReadError,
    MalformedRecordError,
)
from social_graph.graph.builder import GraphBuilder
from social_graph.graph.store import GraphStore
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)

Record = tuple[str, list[str]]


class DatasetLoader:
    """Parses friendship records and builds graph stores from them."""

    def __init__(
        self,
        user_delimiter: str = ",",
        friend_delimiter: str = ";",
        encoding: str = "utf-8",
        symmetrize: bool = False,
        skip_malformed: bool = False,
    ) -> None:
        """Initialize the loader.

        Args:
            user_delimiter: Separates the user from the friend list.
            friend_delimiter: Separates friends from one another.
            encoding: File encoding.
            symmetrize: Whether to add missing reverse edges.
            skip_malformed: Log and skip bad records instead of raising.
        """
        self.user_delimiter = user_delimiter
        self.friend_delimiter = friend_delimiter
        self.encoding = encoding
        self.symmetrize = symmetrize
        self.skip_malformed = skip_malformed

    @classmethod
    def from_settings(cls, settings: DatasetSettings) -> "DatasetLoader":
        """Create a loader from dataset settings."""
        return cls(
            user_delimiter=settings.user_delimiter,
            friend_delimiter=settings.friend_delimiter,
            encoding=settings.encoding,
            symmetrize=settings.symmetrize,
            skip_malformed=settings.skip_malformed,
        )

    def parse_line(self, line: str) -> Record:
        """Split one record line into a user and its friends.

        Args:
            line: The raw line, without a trailing newline.

        Returns:
            (user, friends); the user is empty when the line has none.
        """
        user, _, rest = line.partition(self.user_delimiter)
        friends = [
            token.strip()
            for token in rest.split(self.friend_delimiter)
            if token.strip()
        ]
        return user.strip(), friends

    def parse_records(
        self,
        lines: Iterable[str],
        source: str = "<memory>",
    ) -> Iterator[Record]:
        """Parse record lines, skipping blank ones.

        Args:
            lines: Raw record lines.
            source: Name used in error messages.

        Yields:
            (user, friends) per record.

        Raises:
            MalformedRecordError: On a record without a user, unless
                ``skip_malformed`` is set.
        """
        for line_no, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")
            if not line.strip():
                continue

            user, friends = self.parse_line(line)
            if not user:
                if self.skip_malformed:
                    logger.warning(
                        "Skipping malformed record",
                        source=source,
                        line=line_no,
                        reason="missing user",
                    )
                    continue
                raise MalformedRecordError(source, line_no, "missing user")

            yield user, friends

    def load_lines(self, lines: Iterable[str], source: str = "<memory>") -> GraphStore:
        """Build a frozen store from record lines.

        Args:
            lines: Raw record lines.
            source: Name used in logs and error messages.

        Returns:
            The frozen GraphStore.
        """
        builder = GraphBuilder(symmetrize=self.symmetrize)
        return builder.build_from_records(self.parse_records(lines, source))

    def load(self, path: Path) -> GraphStore:
        """Build a frozen store from a dataset file.

        Args:
            path: Path to the record file.

        Returns:
            The frozen GraphStore.

        Raises:
            DatasetNotFoundError: If the file does not exist.
            DatasetReadError: If the path cannot be read.
            DatasetDecodeError: If the file is not valid in the configured encoding.
            MalformedRecordError: On a bad record.
        """
        try:
            with open(path, encoding=self.encoding) as f:
                store = self.load_lines(f, source=str(path))
        except FileNotFoundError as e:
            raise DatasetNotFoundError(str(path), cause=e) from e
        except UnicodeDecodeError as e:
            raise DatasetDecodeError(str(path), self.encoding, e) from e
        except OSError as e:
            raise DatasetReadError(str(path), cause=e) from e

        logger.info(
            "Loaded dataset",
            path=str(path),
            user_count=store.user_count,
            edge_count=store.edge_count,
        )
        return store


def load_dataset(path: Path | None = None, settings: DatasetSettings | None = None) -> GraphStore:
    """Load the configured dataset.

    Args:
        path: Dataset file; defaults to ``settings.path``.
        settings: Dataset settings; defaults to a fresh DatasetSettings().

    Returns:
        The frozen GraphStore.
    """
    settings = settings or DatasetSettings()
    return DatasetLoader.from_settings(settings).load(path or settings.path)
