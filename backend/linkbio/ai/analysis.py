"""
AI-assisted analysis of reported issues.
"""
import logging
import re
from typing import Dict, List, Optional

from ..core import sentry
from .perplexity import PerplexityClient, PerplexityError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "Jesteś asystentem AI, który analizuje zgłoszenia usterek w serwisie internetowym i "
    "sugeruje możliwe rozwiązania. Podaj szczegółową analizę problemu i konkretne "
    "kroki, które można podjąć, aby go rozwiązać. Twoja odpowiedź powinna być "
    "techniczna, ale zrozumiała dla osoby znającej podstawy programowania. Podziel "
    "odpowiedź na sekcje: \"Analiza problemu\", \"Możliwe przyczyny\" i \"Sugerowane rozwiązania\"."
)

ANALYSIS_FAILED_MESSAGE = "Wystąpił błąd podczas analizy usterki. Spróbuj ponownie później."

HEADING_RE = re.compile(r"^\s*#{1,3}\s+(.+?)\s*#*\s*$")


def build_messages(title: str, description: Optional[str] = None, severity: Optional[str] = None) -> List[Dict[str, str]]:
    lines = ["Proszę o analizę następującej usterki:", f"Tytuł: {title}"]
    if description:
        lines.append(f"Opis: {description}")
    if severity:
        lines.append(f"Priorytet: {severity}")
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "\n".join(lines) + "\n"},
    ]


async def analyze_issue(
    title: str,
    description: Optional[str] = None,
    severity: Optional[str] = None,
    client: Optional[PerplexityClient] = None,
) -> str:
    """
    Ask the model for an analysis of an issue.

    Never raises: any failure is logged and replaced by a generic message
    that callers show to the user as-is.
    """
    client = client or PerplexityClient()
    try:
        return await client.complete(build_messages(title, description, severity), temperature=0.2)
    except PerplexityError as e:
        logger.error(f"[AI] Error analyzing issue with Perplexity: {e}")
        sentry.capture_message(f"Issue analysis failed: {e}", level="error")
        return ANALYSIS_FAILED_MESSAGE


def split_analysis_sections(text: str) -> List[Dict[str, Optional[str]]]:
    """
    Split model output into titled sections.

    A line starting with one to three '#' characters opens a section titled by
    the heading text. Text before the first heading becomes a section with no
    title. Empty sections without a title are dropped.
    """
    sections: List[Dict[str, Optional[str]]] = []
    title: Optional[str] = None
    buffer: List[str] = []

    def flush() -> None:
        content = "\n".join(buffer).strip()
        if title is not None or content:
            sections.append({"title": title, "content": content})

    for line in (text or "").splitlines():
        match = HEADING_RE.match(line)
        if match:
            flush()
            title = match.group(1)
            buffer = []
        else:
            buffer.append(line)
    flush()
    return sections
