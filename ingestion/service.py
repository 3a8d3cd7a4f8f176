import logging
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .errors import ChannelError, OperationInProgressError
from .remote import DEMO_URL, RemoteConfig, fetch_remote_records
from .samples import DEMO_API_DATA, DEMO_CSV_DATA, SAMPLE_DATA
from .schemas import CHANNELS, CSV_CHANNEL, REMOTE_CHANNEL, SAMPLE_CHANNEL
from .utils import parse_csv_text

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = (
    "Welcome to AIRR Intelligence. Three distinct data sources are now available: the local Sample set, "
    "a CSV import channel, and the MongoDB API bridge."
)
ANALYSIS_OPERATION = "analysis"


def make_message(role: str, content: str, analysis: Optional[Dict[str, Any]] = None,
                 message_id: Optional[str] = None) -> Dict[str, Any]:
    msg: Dict[str, Any] = {
        "id": message_id or uuid.uuid4().hex,
        "role": role,
        "content": content,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if analysis is not None:
        msg["analysis"] = analysis
    return msg


class DataSession:
    """In-memory state of one user: a dataset per channel plus the active pointer.

    Datasets are only ever replaced as a whole. ``operation`` marks a channel
    busy for the duration of an ingestion so overlapping loads are refused.
    """

    def __init__(self) -> None:
        self.datasets: Dict[str, Optional[List[Dict[str, Any]]]] = {
            SAMPLE_CHANNEL: [dict(r) for r in SAMPLE_DATA],
            CSV_CHANNEL: None,
            REMOTE_CHANNEL: None,
        }
        self.active_channel = SAMPLE_CHANNEL
        self.in_progress: Dict[str, bool] = {name: False for name in CHANNELS + [ANALYSIS_OPERATION]}
        self._flags_lock = threading.Lock()
        self.remote_config: Optional[RemoteConfig] = None
        self.messages: List[Dict[str, Any]] = [make_message("assistant", WELCOME_MESSAGE, message_id="welcome")]

    # ---- channels ----

    def is_populated(self, channel: str) -> bool:
        return self.datasets.get(channel) is not None

    def available_channels(self) -> List[str]:
        return [c for c in CHANNELS if self.is_populated(c)]

    def select_channel(self, channel: str) -> None:
        if channel not in CHANNELS:
            raise ChannelError(f"Unknown data source: {channel}")
        if not self.is_populated(channel):
            raise ChannelError(f"Data source '{channel}' has not been loaded yet")
        self.active_channel = channel

    @property
    def active_records(self) -> List[Dict[str, Any]]:
        return self.datasets.get(self.active_channel) or []

    def _replace(self, channel: str, records: List[Dict[str, Any]]) -> None:
        self.datasets[channel] = [dict(r) if isinstance(r, dict) else r for r in records]
        self.active_channel = channel

    @contextmanager
    def operation(self, name: str) -> Iterator[None]:
        with self._flags_lock:
            if self.in_progress.get(name):
                raise OperationInProgressError(f"An operation on '{name}' is already in progress")
            self.in_progress[name] = True
        try:
            yield
        finally:
            self.in_progress[name] = False

    def add_message(self, role: str, content: str, analysis: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        msg = make_message(role, content, analysis)
        self.messages.append(msg)
        return msg

    # ---- ingestion ----

    def import_csv_text(self, text: str, filename: str = "upload.csv") -> int:
        """Parse CSV text into the CSV channel; returns the number of records.

        Zero usable rows is a no-op: nothing is replaced and the active
        channel stays where it was.
        """
        with self.operation(CSV_CHANNEL):
            records = parse_csv_text(text)
            if not records:
                logger.info("CSV import of %s produced no rows; keeping current dataset", filename)
                return 0
            self._replace(CSV_CHANNEL, records)
        logger.info("CSV import of %s: %d records", filename, len(records))
        self.add_message("assistant", f"CSV Imported: {len(records)} records processed from {filename}.")
        return len(records)

    def load_demo_csv(self) -> int:
        with self.operation(CSV_CHANNEL):
            self._replace(CSV_CHANNEL, DEMO_CSV_DATA)
        self.add_message("assistant", "CSV Channel: Pre-loaded with demo student records (Tech Pioneers).")
        return len(DEMO_CSV_DATA)

    def is_current_remote(self, config: RemoteConfig) -> bool:
        return (
            self.active_channel == REMOTE_CHANNEL
            and self.remote_config is not None
            and self.remote_config.url == config.url
            and self.remote_config.method == config.method
        )

    def connect_remote(self, config: RemoteConfig, bypass_data: Optional[List[Dict[str, Any]]] = None) -> int:
        """Load the remote channel, either over HTTP or from ``bypass_data``.

        Any error propagates and leaves every dataset untouched.
        """
        with self.operation(REMOTE_CHANNEL):
            if bypass_data is not None:
                records = bypass_data
            else:
                records = fetch_remote_records(config)
            self._replace(REMOTE_CHANNEL, records)
            self.remote_config = config
        if bypass_data is not None:
            self.add_message("assistant", "API Channel: Connected to simulated MongoDB source (Science Leaders).")
        else:
            logger.info("Remote fetch from %s: %d records", config.url, len(records))
            self.add_message(
                "assistant",
                f"API synchronized: Active connection to {config.url}. {len(records)} records retrieved.",
            )
        return len(records)

    def connect_demo_remote(self, config: Optional[RemoteConfig] = None) -> int:
        base = config or RemoteConfig(url=DEMO_URL)
        demo_config = RemoteConfig(url=DEMO_URL, method=base.method, headers=base.headers, body=base.body)
        return self.connect_remote(demo_config, bypass_data=DEMO_API_DATA)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "active_channel": self.active_channel,
            "available_channels": self.available_channels(),
            "counts": {c: len(self.datasets[c]) for c in self.available_channels()},
            "in_progress": dict(self.in_progress),
            "remote_config": self.remote_config.to_dict() if self.remote_config else None,
            "messages": list(self.messages),
        }


class SessionStore:
    """Process-local registry of DataSession objects keyed by a random id."""

    def __init__(self) -> None:
        self._sessions: Dict[str, DataSession] = {}

    def get(self, sid: Optional[str]) -> Optional[DataSession]:
        if not sid:
            return None
        return self._sessions.get(sid)

    def create(self) -> Tuple[str, DataSession]:
        sid = uuid.uuid4().hex
        self._sessions[sid] = DataSession()
        return sid, self._sessions[sid]
