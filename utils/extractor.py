import json
import re
from utils.utils import setup_logger

logger = setup_logger(__name__)

JSON_FENCE = re.compile(r"```json(.*?)```", re.IGNORECASE | re.DOTALL)
ANY_FENCE = re.compile(r"```(.*?)```", re.DOTALL)


def extract_json(text):
    """
    Pull the part of a model reply that most likely holds the JSON payload.

    Tries, in order: a ```json fence, any ``` fence, then the slice from the
    first '{' to the last '}'. Braces are not balanced, so the result may
    still fail to parse. Returns None when nothing looks like JSON.
    """
    if not text:
        return None

    fenced = JSON_FENCE.search(text)
    if fenced:
        return fenced.group(1).strip()

    generic = ANY_FENCE.search(text)
    if generic:
        return generic.group(1).strip()

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        return text[start:end + 1].strip()

    return None


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def parse_medicine_json(raw_text):
    """Parse the model reply into a dict, or None if it is not a JSON object."""
    candidate = extract_json(raw_text)
    if candidate is None:
        candidate = raw_text or ""
    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Could not parse JSON from Gemini, returning raw text. ({e})")
        return None
    if not isinstance(parsed, dict):
        logger.warning(f"Gemini returned JSON {type(parsed).__name__}, expected an object. Returning raw text.")
        return None
    return parsed
