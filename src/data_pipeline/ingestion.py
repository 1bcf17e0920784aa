"""CSV ingestion for roster data files.

Reads the three roster exports into record types used by the balancer:
- Players file -> Participant
- Messages file -> MessageEvent
- Spend file -> SpendEvent

Numeric columns are coerced leniently: rows with an unreadable player id are
dropped, any other blank or unreadable value counts as 0.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pandas as pd

from src.data_pipeline.config import (
    DATA_DIR,
    FILE_PATTERNS,
    ID_COLUMN,
    MESSAGE_COLUMNS,
    PLAYER_COLUMNS,
    SPEND_COLUMNS,
)
from src.team_balancer.metrics import AuxiliaryEvent, get_metric
from src.team_balancer.models import MessageEvent, Participant, SpendEvent

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    """Raised when CSV ingestion fails."""


@dataclass
class RosterData:
    """Records loaded for a single balancing run."""

    participants: List[Participant]
    auxiliary: Dict[str, List[AuxiliaryEvent]] = field(default_factory=dict)

    @property
    def messages(self) -> Optional[List[MessageEvent]]:
        return self.auxiliary.get("messages")

    @property
    def spends(self) -> Optional[List[SpendEvent]]:
        return self.auxiliary.get("spends")

    def auxiliary_events(
        self, dataset: Optional[str]
    ) -> Optional[List[AuxiliaryEvent]]:
        """Return the loaded events for *dataset*, or None if not loaded."""
        if dataset is None:
            return None
        return self.auxiliary.get(dataset)


class RosterIngester:
    """Reads roster CSV exports with pandas.

    Each read method returns a list of frozen records, in file order.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        # Metric auxiliary_dataset name -> reader
        self.auxiliary_readers: Dict[str, Callable[[], List[AuxiliaryEvent]]] = {
            "messages": self.read_messages,
            "spends": self.read_spends,
        }

    def _resolve_path(self, file_key: str) -> Path:
        """Build the full file path for a given file key, raising if missing."""
        filepath = self.data_dir / FILE_PATTERNS[file_key]
        if not filepath.exists():
            raise FileNotFoundError(
                f"Expected file not found: {filepath}"
            )
        return filepath

    def _read_table(self, file_key: str, columns: List[str]) -> pd.DataFrame:
        """Read *file_key* and return its *columns* as integers."""
        filepath = self._resolve_path(file_key)
        logger.info("Reading %s: %s", file_key, filepath.name)

        df = pd.read_csv(filepath, skipinitialspace=True)
        df.columns = [str(c).strip() for c in df.columns]

        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise IngestionError(
                f"{filepath.name} is missing required columns: {missing}"
            )

        df = df[columns].apply(pd.to_numeric, errors="coerce")

        bad_ids = df[ID_COLUMN].isna()
        if bad_ids.any():
            logger.warning(
                "Dropping %d rows with no readable %s from %s",
                int(bad_ids.sum()), ID_COLUMN, filepath.name,
            )
            df = df[~bad_ids]

        df = df.fillna(0).astype(int).reset_index(drop=True)
        logger.info("Loaded %d %s rows", len(df), file_key)
        return df

    # ------------------------------------------------------------------
    # Individual files
    # ------------------------------------------------------------------
    def read_players(self) -> List[Participant]:
        df = self._read_table("players", PLAYER_COLUMNS)
        return [
            Participant(
                participant_id=int(pid),
                events_participated=int(events),
                points_earned=int(points),
            )
            for pid, events, points in df.itertuples(index=False, name=None)
        ]

    def read_messages(self) -> List[MessageEvent]:
        df = self._read_table("messages", MESSAGE_COLUMNS)
        return [
            MessageEvent(participant_id=int(pid), text_length=int(length))
            for pid, length in df.itertuples(index=False, name=None)
        ]

    def read_spends(self) -> List[SpendEvent]:
        df = self._read_table("spends", SPEND_COLUMNS)
        return [
            SpendEvent(participant_id=int(pid), points_spent=int(spent))
            for pid, spent in df.itertuples(index=False, name=None)
        ]

    # ------------------------------------------------------------------
    # Per-run loading
    # ------------------------------------------------------------------
    def read_for_metric(self, metric: str) -> RosterData:
        """Read the players file plus the auxiliary file *metric* needs.

        Raises:
            ValueError: If *metric* is unknown.
            IngestionError: If any required file cannot be read.
        """
        definition = get_metric(metric)
        dataset = definition.auxiliary_dataset

        try:
            data = RosterData(participants=self.read_players())
            if dataset is not None:
                data.auxiliary[dataset] = self.auxiliary_readers[dataset]()
        except (OSError, ValueError) as e:
            raise IngestionError(f"Failed to read CSV files: {e}") from e

        return data
