from utils.models import TextEntry, as_list, classify_side_effect, classify_use
from utils.utils import as_text

UNKNOWN_NAME = "Unknown medicine"
UNKNOWN_SEVERITY = "Severity not specified"
DEFAULT_NOTE = ("This information is for educational purposes only. "
                "Always consult a qualified healthcare professional.")


def _use_line(use):
    if isinstance(use, TextEntry):
        return use.text
    parts = [as_text(p) for p in (use.condition, use.description) if p]
    return ": ".join(parts) or as_text(use.source)


def format_medicine_data(data):
    """
    Turn parsed MedicineInfo into a plain-text message (no markdown emphasis).

    Missing or oddly shaped fields degrade to an empty section or a default,
    so this never raises for JSON-shaped input.
    """
    if not isinstance(data, dict):
        data = {}

    name = data.get("name")
    message = f"{as_text(name) if name else UNKNOWN_NAME}\n\n"

    uses = as_list(data.get("uses"))
    if uses:
        message += "Uses:\n"
        for use in filter(None, map(classify_use, uses)):
            message += f"- {_use_line(use)}\n"
        message += "\n"

    side_effects = as_list(data.get("sideEffects"))
    if side_effects:
        message += "Side Effects:\n"
        for group in map(classify_side_effect, side_effects):
            if isinstance(group, TextEntry):
                message += f"- {group.text}\n\n"
                continue

            severity = as_text(group.severity) if group.severity else UNKNOWN_SEVERITY
            message += f"- {severity}:\n"
            for effect in group.effects:
                message += f"  - {as_text(effect)}\n"
            message += "\n"

    note = data.get("note")
    message += f"Note:\n{as_text(note) if note else DEFAULT_NOTE}\n"

    return message.strip()
