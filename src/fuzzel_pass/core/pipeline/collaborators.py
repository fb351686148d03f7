from __future__ import annotations

"""
Pipeline Collaborators.

Bundles the external capabilities the selection pipeline depends on, so
the orchestrator can run against real tools or against in-memory fakes.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Sequence

from fuzzel_pass.core.analysis.classifiers import AnsiColorClassifier, LeafClassifier
from fuzzel_pass.infra.fs import normalize_path
from fuzzel_pass.infra.pass_store import PassStore
from fuzzel_pass.infra.picker import DmenuPicker
from fuzzel_pass.infra.sinks import ClipboardSink, TypeSink

ListingProvider = Callable[[], str]
EntryProvider = Callable[[str], str]
Picker = Callable[[Sequence[str]], str]
Sink = Callable[[str], None]


@dataclass
class Collaborators:
    """
    External capabilities used by a selection run.

    Attributes:
        listing_provider: Returns the raw tree listing.
        entry_provider: Returns the body of the entry at a path.
        picker: Returns one option chosen by the user.
        clipboard_sink: Places text on the clipboard.
        type_sink: Types single-line text into the focused window.
        classifier: Marker handling strategy for the listing.
    """
    listing_provider: ListingProvider
    entry_provider: EntryProvider
    picker: Picker
    clipboard_sink: Sink
    type_sink: Sink
    classifier: LeafClassifier = field(default_factory=AnsiColorClassifier)


def build_collaborators(config: Dict[str, Any]) -> Collaborators:
    """
    Wire the real external tools from a validated configuration.

    Args:
        config: Normalized configuration (see validate_config).

    Returns:
        Collaborators: Instances backed by pass, the picker and the sinks.
    """
    store_dir = config["password_store_dir"]
    store = PassStore(config["pass_command"], normalize_path(store_dir) if store_dir else "")
    picker = DmenuPicker(config["picker_command"])
    clipboard = ClipboardSink(config["clipboard_command"])
    typer = TypeSink(config["type_command"])

    return Collaborators(
        listing_provider=store.list_text,
        entry_provider=store.show,
        picker=picker.pick,
        clipboard_sink=clipboard.deliver,
        type_sink=typer.deliver,
        classifier=AnsiColorClassifier(config["directory_color"]),
    )
