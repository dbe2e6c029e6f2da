from __future__ import annotations

import re

from ats_engine.schemas import JDSection, SectionType

from .vocabulary import (
    ABOUT_SECTION_MARKERS,
    NICE_TO_HAVE_MARKERS,
    REQUIRED_SECTION_MARKERS,
    RESPONSIBILITIES_MARKERS,
    ROLE_WORD_RE,
)

_MARKDOWN_HEADER_RE = re.compile(r"^#{1,3}\s+")
_BOLD_HEADER_RE = re.compile(r"^\*\*[^*]+\*\*\s*$")
_CAPS_HEADER_RE = re.compile(r"^[A-Z][A-Z\s/&-]{3,}$")
_COLON_HEADER_RE = re.compile(r"^[A-Za-z][A-Za-z\s'’-]{2,}:\s*$")
_BULLET_START_RE = re.compile(r"^\s*[-*•]")
_HTML_TAG_RE = re.compile(r"<[^>]+>")
_TITLE_LABEL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"job title:[ \t]*([^\n]+)", re.IGNORECASE),
    re.compile(r"position:[ \t]*([^\n]+)", re.IGNORECASE),
    re.compile(r"role:[ \t]*([^\n]+)", re.IGNORECASE),
    re.compile(r"title:[ \t]*([^\n]+)", re.IGNORECASE),
    re.compile(r"hiring for:[ \t]*([^\n]+)", re.IGNORECASE),
    re.compile(r"we are hiring[^:\n]*:[ \t]*([^\n]+)", re.IGNORECASE),
)
_TITLE_SCAN_LINES = 5
_MAX_HEADER_CHARS = 80
_MAX_TITLE_WORDS = 10


def is_section_header(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return False
    if _MARKDOWN_HEADER_RE.match(stripped):
        return True
    if _BOLD_HEADER_RE.match(stripped):
        return True
    if _CAPS_HEADER_RE.match(stripped) and len(stripped) < _MAX_HEADER_CHARS:
        return True
    if _COLON_HEADER_RE.match(stripped):
        return True
    return stripped.endswith(":") and len(stripped) < _MAX_HEADER_CHARS and not _BULLET_START_RE.match(stripped)


def _clean_header(line: str) -> str:
    header = _MARKDOWN_HEADER_RE.sub("", line.strip())
    header = header.strip("*").strip()
    return re.sub(r":\s*$", "", header).strip()


def _marker_type(text: str) -> SectionType | None:
    lowered = text.lower()
    if any(marker in lowered for marker in NICE_TO_HAVE_MARKERS):
        return "niceToHave"
    if any(marker in lowered for marker in REQUIRED_SECTION_MARKERS):
        return "required"
    if any(marker in lowered for marker in RESPONSIBILITIES_MARKERS):
        return "responsibilities"
    return None


def classify_section(header: str) -> SectionType:
    section_type = _marker_type(header)
    if section_type is not None:
        return section_type
    lowered = header.lower()
    if any(marker in lowered for marker in ABOUT_SECTION_MARKERS):
        return "about"
    return "unknown"


def _fallback_sections(lines: list[str], job_description: str) -> list[JDSection]:
    sections: list[JDSection] = []
    current_type: SectionType = "unknown"
    current: list[str] = []

    for line in lines:
        detected = _marker_type(line.strip())
        if detected is not None and detected != current_type:
            if current:
                sections.append(JDSection(type=current_type, content="\n".join(current).strip()))
            current_type = detected
            current = [line]
        else:
            current.append(line)

    if current:
        sections.append(JDSection(type=current_type, content="\n".join(current).strip()))
    if not sections:
        sections.append(JDSection(type="unknown", content=job_description.strip()))
    return sections


def parse_jd_sections(job_description: str) -> list[JDSection]:
    """Split a job description into typed sections.

    Header lines (markdown, bold, ALL CAPS or colon-terminated) delimit the
    sections; text before the first header is not a section. Descriptions
    without headers fall back to switching zones on marker words per line.
    """
    if not job_description or not job_description.strip():
        return []

    lines = job_description.splitlines()
    header_positions = [index for index, line in enumerate(lines) if is_section_header(line)]
    if not header_positions:
        return _fallback_sections(lines, job_description)

    sections: list[JDSection] = []
    for position, line_index in enumerate(header_positions):
        end = header_positions[position + 1] if position + 1 < len(header_positions) else len(lines)
        header = _clean_header(lines[line_index])
        content = "\n".join(lines[line_index + 1 : end]).strip()
        sections.append(JDSection(type=classify_section(header), header=header, content=content))
    return sections


def _clean_title_line(line: str) -> str:
    cleaned = _MARKDOWN_HEADER_RE.sub("", line)
    cleaned = cleaned.strip("*").strip()
    return _HTML_TAG_RE.sub("", cleaned).strip()


def extract_job_title(job_description: str) -> str | None:
    """Find the job title: explicit label, best role-word line, or a short first line."""
    if not job_description or not job_description.strip():
        return None

    for pattern in _TITLE_LABEL_PATTERNS:
        match = pattern.search(job_description)
        if match and match.group(1).strip():
            return match.group(1).strip()

    lines = [line.strip() for line in job_description.splitlines() if line.strip()]
    scan_limit = min(len(lines), _TITLE_SCAN_LINES)
    best_line: str | None = None
    best_score = 0.0
    for index in range(scan_limit):
        line = lines[index]
        cleaned = _clean_title_line(line)
        if not cleaned or not ROLE_WORD_RE.search(cleaned):
            continue
        score = 3.0
        if len(cleaned) < 80:
            score += 2
        if len(cleaned) < 50:
            score += 1
        if not cleaned.endswith(".") and len(cleaned.split()) <= _MAX_TITLE_WORDS:
            score += 1
        score += (scan_limit - index) * 0.5
        if _MARKDOWN_HEADER_RE.match(line) or line.startswith("**"):
            score += 1
        if score > best_score:
            best_line, best_score = cleaned, score
    if best_line:
        return best_line

    first = _clean_title_line(lines[0]) if lines else ""
    if first and not first.endswith((".", ":")) and len(first.split()) <= _MAX_TITLE_WORDS:
        if not is_section_header(lines[0]) and _marker_type(first) is None:
            return first
    return None
