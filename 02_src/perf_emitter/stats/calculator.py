"""Derive page-load statistics from raw navigation and resource timing."""

from collections.abc import Iterable, Mapping, Sized
from typing import Any

from ..models import CalculatedStats, ResourceEntry

# metric name -> (end field, start field)
TIMING_METRICS = {
    # time spent following redirects
    "redirection_time": ("fetchStart", "navigationStart"),
    # initial navigation until the first response byte
    "time_to_first_byte": ("responseStart", "navigationStart"),
    # initial request until all blocking assets are loaded
    "dom_content_loaded": ("domContentLoadedEventEnd", "fetchStart"),
    # initial request until every asset is loaded
    "full_page_load": ("loadEventEnd", "fetchStart"),
    "dns": ("domainLookupEnd", "domainLookupStart"),
    "tcp_connection_time": ("connectEnd", "connectStart"),
    # full html response from the server
    "browser_request_time": ("responseEnd", "requestStart"),
    "browser_request_first_byte": ("responseStart", "requestStart"),
    "browser_request_response_time": ("responseEnd", "responseStart"),
    # parsing html into a DOM tree plus blocking resources
    "dom_interactive_time": ("domInteractive", "responseEnd"),
    "total_resource_load_time": ("loadEventStart", "responseEnd"),
    "total_blocking_resource_load_time": ("domContentLoadedEventStart", "responseEnd"),
}

# extension prefix -> resource type
RESOURCE_TYPES = (
    ("css", "css"),
    ("js", "js"),
    ("png", "image"),
    ("svg", "image"),
    ("jpg", "image"),
)


def is_empty(item: Any) -> bool:
    """True for None and for zero-length mappings or sequences."""
    if item is None:
        return True
    if isinstance(item, (str, bytes)):
        return False
    return isinstance(item, Sized) and len(item) == 0


def extract_resource_type(name: str) -> str | None:
    """Classify a resource by the text after the last '.' in its name."""
    extension = name[name.rfind(".") + 1 :]
    for prefix, resource_type in RESOURCE_TYPES:
        if extension.startswith(prefix):
            return resource_type
    return None


def mean(values: list[float]) -> float:
    """Arithmetic mean of a non-empty list."""
    return sum(values) / len(values)


def compute_stats(
    timing: Mapping[str, float] | None,
    resource_entries: Iterable[Any] | None,
    first_paint: float | None = None,
) -> CalculatedStats:
    """
    Compute the flat statistics map for one performance event.

    Timing metrics are plain differences (negative values pass through) and
    are omitted entirely when timing is empty. ``resources_avg_load_time``
    maps css/js/image to the integer-truncated mean duration; it is omitted
    when there are no entries and empty when none of them classify.

    Args:
        timing: Navigation timing snapshot keyed by field name.
        resource_entries: ResourceEntry instances, mappings or timing objects.
            Any iterable is accepted; it is read exactly once.
        first_paint: First paint timestamp; ignored when falsy.

    Returns:
        Freshly built statistics dict. Inputs are not modified.

    Raises:
        KeyError: timing is non-empty but lacks a required field. Missing or
            None timing is tolerated; a partial snapshot is not.
    """
    calculated: CalculatedStats = {}

    if not is_empty(timing):
        for metric, (end, start) in TIMING_METRICS.items():
            calculated[metric] = timing[end] - timing[start]
        if first_paint:
            calculated["first_paint_time"] = first_paint

    # Generators have no length, so emptiness is decided after reading them
    entries = [] if resource_entries is None else list(resource_entries)
    if entries:
        load_times: dict[str, list[float]] = {}
        for raw_entry in entries:
            entry = ResourceEntry.coerce(raw_entry)
            resource_type = extract_resource_type(entry.name)
            if resource_type:
                load_times.setdefault(resource_type, []).append(entry.duration)

        calculated["resources_avg_load_time"] = {
            resource_type: int(mean(durations))
            for resource_type, durations in load_times.items()
        }

    return calculated
