"""
Render-time shapes for MedicineInfo entries.

Gemini mostly follows the schema in the prompt, but `uses` and `sideEffects`
entries come back either as plain strings or as objects. Each raw entry is
classified into one of these variants right before it is rendered.
"""
from typing import List, NamedTuple, Optional, Union


class TextEntry(NamedTuple):
    text: str


class UseRecord(NamedTuple):
    condition: Optional[str]
    description: Optional[str]
    source: Union[dict, list]


class SeverityGroup(NamedTuple):
    severity: Optional[str]
    effects: List


def as_list(value):
    """Lists pass through, anything else counts as missing."""
    return value if isinstance(value, list) else []


def classify_use(entry):
    if isinstance(entry, str):
        return TextEntry(entry)
    if isinstance(entry, dict):
        return UseRecord(entry.get("condition"), entry.get("description"), entry)
    if isinstance(entry, list):
        return UseRecord(None, None, entry)
    # numbers, booleans, null
    return None


def classify_side_effect(entry):
    if isinstance(entry, str):
        return TextEntry(entry)
    if isinstance(entry, dict):
        return SeverityGroup(entry.get("severity"), as_list(entry.get("effects")))
    return SeverityGroup(None, [])
