"""Store location, current user and service wiring for the visitreport CLI."""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from visitreport.services.reports import InMemoryVisitStore, ReportsService

console = Console()

# State storage
config_dir = os.path.expanduser("~/.config/visitreport")
default_store_path = os.path.join(config_dir, "store.json")

DEFAULT_USER = "local"

_store_path: Optional[str] = None


def configure_logging(verbose: bool = False) -> None:
    """Install rich log output; ``verbose`` enables package debug logs."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                markup=False,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )
    logging.getLogger("visitreport").setLevel(
        logging.DEBUG if verbose else logging.INFO
    )


def set_store_path(path: Optional[str]) -> None:
    global _store_path
    _store_path = path


def get_store_path() -> str:
    return _store_path or os.environ.get("VISITREPORT_STORE") or default_store_path


def current_user() -> str:
    """Opaque handle of the current user."""
    return os.environ.get("VISITREPORT_USER") or DEFAULT_USER


def load_store() -> InMemoryVisitStore:
    return InMemoryVisitStore.load(get_store_path())


def save_store(store: InMemoryVisitStore) -> None:
    store.save(get_store_path())


def get_service(store: InMemoryVisitStore) -> ReportsService:
    return ReportsService(store)
