"""Worker configuration records and their canonical forms.

A suite's configuration describes the execution environment its tests need.
The canonical string form takes part in test ids, and the worker hash groups
tests that can share a worker process.
"""

import hashlib
from collections.abc import Iterable, Mapping, Sequence

from pydantic import Field

from runner_model.models.base import Model


class ConfigurationEntry(Model):
    """Single ``name=value`` pair of a worker configuration."""

    name: str = Field(..., description="Configuration key, e.g. 'browser'")
    value: str = Field(..., description="Configuration value, e.g. 'chromium'")


Configuration = Sequence[ConfigurationEntry]


def serialize_configuration(configuration: Configuration) -> str:
    """Render a configuration as ``name1=value1, name2=value2``.

    An empty configuration renders as an empty string.
    """
    return ", ".join(f"{entry.name}={entry.value}" for entry in configuration)


def configuration_from_mapping(mapping: Mapping[str, object]) -> Configuration:
    """Build configuration entries from a plain mapping, keeping its order.

    Values are converted to strings; names must already be strings.

    Raises:
        pydantic.ValidationError: If a name is not a string

    """
    return [
        ConfigurationEntry(name=name, value=str(value))
        for name, value in mapping.items()
    ]


def compute_worker_hash(
    configuration_string: str, registrations: Iterable[str] = ()
) -> str:
    """Derive the worker hash from a configuration and registration sites.

    Args:
        configuration_string: Canonical configuration, see
            :func:`serialize_configuration`
        registrations: Source locations where worker-scoped fixtures or
            environments were registered, in registration order

    Returns:
        Hex digest; equal inputs always produce equal hashes.

    """
    digest = hashlib.sha1(configuration_string.encode())
    for location in registrations:
        digest.update(b"\0")
        digest.update(location.encode())
    return digest.hexdigest()
