from utils.extractor import parse_medicine_json
from utils.formatter import format_medicine_data
from utils.utils import setup_logger

logger = setup_logger(__name__)

# The query is interpolated as-is; it is not escaped against prompt injection.
PROMPT_TEMPLATE = """
Return ONLY valid JSON for the medicine "{query}" using EXACTLY this schema:

{{
  "name": "string",
  "uses": ["string", "string", ...],
  "sideEffects": [
    {{ "severity": "Common (affecting more than 1 in 100 people)", "effects": ["string", "string"] }},
    {{ "severity": "Uncommon (affecting 1 to 10 in 1000 people)", "effects": ["string", "string"] }},
    {{ "severity": "Rare (affecting 1 to 10 in 10,000 people)", "effects": ["string", "string"] }},
    {{ "severity": "Very Rare (affecting less than 1 in 10,000 people)", "effects": ["string", "string"] }},
    {{ "severity": "Other potential side effects", "effects": ["string", "string"] }},
    {{ "severity": "Overdose side effects", "effects": ["string", "string"] }}
  ],
  "note": "string"
}}

Do not add any commentary outside JSON. Do not wrap it in Markdown unless it's a JSON code fence.
"""


def build_prompt(query):
    return PROMPT_TEMPLATE.format(query=query)


class MedicineInfoService:
    def __init__(self, client):
        self.client = client

    def lookup(self, query):
        """
        Ask Gemini about one medicine and return {"text": ..., "raw": ...}.

        `raw` is the parsed object, or None when the reply was not usable JSON,
        in which case `text` is the reply verbatim. UpstreamError from the
        client propagates to the caller.
        """
        logger.info(f"Medicine lookup: {query}")
        raw_text = self.client.generate_content(build_prompt(query))

        parsed = parse_medicine_json(raw_text)
        if parsed is None:
            return {"text": raw_text, "raw": None}

        return {"text": format_medicine_data(parsed), "raw": parsed}
