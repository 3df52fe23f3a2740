import json
from typing import Tuple

from labelcheck.core.checklist import MASTER_CHECKLIST, ChecklistItem, render_checklist

RESULT_FIELDS = ("id", "question", "findings", "compliance", "result", "confidence")

_EXAMPLE_RESULTS = [
    {
        "id": 2,
        "question": "Net weight or volume is shown",
        "findings": "The front panel shows 'Net Wt. 500 g' next to the product name.",
        "compliance": "Pass",
        "result": "Pass",
        "confidence": 5,
    },
    {
        "id": 14,
        "question": "A lot or batch number is shown",
        "findings": "No lot or batch code is visible on the photographed side of the pack.",
        "compliance": "Unclear",
        "result": "Unclear",
        "confidence": 2,
    },
]

EXAMPLE_OUTPUT = json.dumps(_EXAMPLE_RESULTS, indent=2)


def build_prompt(items: Tuple[ChecklistItem, ...] = MASTER_CHECKLIST) -> str:
    """
    Build the instruction sent alongside the label image.

    The model is told to answer with a JSON array holding one object per
    checklist item and nothing else.
    """
    instructions = render_checklist(items)
    return f"""You are a food label analysis API. You receive a photo of a packaged food label and evaluate it against a fixed compliance checklist.

**Checklist:**

{instructions}

**Output format:**
Return a JSON array with exactly one object per checklist item, in checklist order. Each object MUST have exactly these six fields:
- "id": the checklist item number (integer)
- "question": the checklist item text (string)
- "findings": what you observed on the label for this item (string)
- "compliance": one of "Pass", "Fail", "Unclear" or "N/A" (string)
- "result": the same value as "compliance" (string)
- "confidence": how confident you are in the verdict, from 1 (guess) to 5 (certain) (integer)

For the final summary item, put the one-sentence summary in "findings" and the overall verdict in "compliance".

**Examples of array elements:**
{EXAMPLE_OUTPUT}

**Instructions:**
- Judge only what is visible in the image. If text is cut off or unreadable, use "Unclear" and a low confidence.
- Use "N/A" when an item does not apply to this product.
- Return ONLY the JSON array. No markdown, no explanations, no text before or after it."""


CHECKLIST_PROMPT = build_prompt()
