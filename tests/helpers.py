"""Helpers for building NMEA test sentences."""

from gpsnmea import calculate_checksum


def with_checksum(content: str) -> str:
    """Frame ``content`` as ``$<content>*<HH>`` with a correct checksum."""
    return f"${content}*{calculate_checksum(content):02X}"


def truncated(sentence: str, field_count: int) -> str:
    """Rebuild ``sentence`` keeping only its first ``field_count`` fields."""
    header, *fields = sentence[1 : sentence.index("*")].split(",")
    return with_checksum(",".join([header, *fields[:field_count]]))
