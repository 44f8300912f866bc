"""
Domain entities for parameter store requests.
Zero external dependencies: pure Python dataclasses only.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

ParameterMap = dict[str, str]


@dataclass(frozen=True)
class ParameterRequest:
    """One desired read (or delete) of a named parameter.

    name:    Name (or path) of the parameter.
    target:  Local file path the resolved value is persisted to, if any.
    default: Fallback text used when the store has no value for *name*.
    """

    name: str
    target: Optional[str] = None
    default: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("parameter name must be a non-empty string")


@dataclass(frozen=True, kw_only=True)
class ParameterWriteRequest(ParameterRequest):
    content: str
    encrypted: bool = False
    description: Optional[str] = None
    key_id: Optional[str] = None
    overwrite: bool = False


def ensure_unique_names(parameters: Iterable[ParameterRequest]) -> None:
    """Raise ValueError if a name appears more than once in a batch."""
    counts = Counter(p.name for p in parameters)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise ValueError(f"duplicate parameter names in batch: {', '.join(duplicates)}")
