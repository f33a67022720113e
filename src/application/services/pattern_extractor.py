"""Pattern extractor service - Heuristic organization extraction from email text.

Used as the terminal step of the extraction chain when the LLM call is
unavailable or fails. Every field degrades to a default; nothing here raises.

All matching is case-insensitive. Phrases that end in a suffix or a
parenthetical go through RunIndex so each scan stays linear in the text
length; the result is the same leftmost, greedy capture a single regex
would return.
"""
import logging
import re
from datetime import datetime
from typing import List, Optional, Tuple

from ...domain.entities.extracted_organization import (
    DEFAULT_ORGANIZATION_NAME,
    ExtractedOrganization,
    Industry,
)
from .phrase_scanner import RunIndex, first_after, positions

logger = logging.getLogger(__name__)

LETTER = re.compile(r"[A-Z]", re.IGNORECASE)

# Organization name: "<Capitalized words> Inc", tried after "from/at/with",
# then anywhere, then as "I'm ... at <Name>"
NAME_RUN = re.compile(r"[a-zA-Z\s&]+", re.IGNORECASE)
NAME_SUFFIX = re.compile(
    r"(?=(Inc|LLC|Corp|Company|Solutions|Technologies|Systems|Group))", re.IGNORECASE
)
NAME_INTRO = re.compile(r"(?:from|at|with)\s+", re.IGNORECASE)
SELF_INTRO = re.compile(r"I'm|I am", re.IGNORECASE)
SELF_INTRO_NAME = re.compile(r".*(?:from|at|with)\s+([A-Z][a-zA-Z\s&]+)", re.IGNORECASE)

LOCATION_RUN = re.compile(r"[a-zA-Z\s,]+", re.IGNORECASE)
LOCATION_SUFFIX = re.compile(r"(?=(CA|NY|TX|FL|WA|OR|MA|USA|United States))", re.IGNORECASE)
LOCATION_INTRO = re.compile(r"(?:based in|located in|from)\s+", re.IGNORECASE)

# Website: "www." or "http(s)://", a domain, and a 2+ letter top-level domain
WEBSITE_PREFIX = re.compile(r"(?=(www\.|https?://))", re.IGNORECASE)
DOMAIN_RUN = re.compile(r"[a-zA-Z0-9.-]+", re.IGNORECASE)
TOP_LEVEL_DOMAIN = re.compile(r"(?=(\.[a-zA-Z]{2}))", re.IGNORECASE)
LETTERS = re.compile(r"[a-zA-Z]+", re.IGNORECASE)

# Owners: "CEO: Jane Doe" first, then "Jane Doe (CEO)"
OWNER_KEYWORD_PATTERN = re.compile(
    r"(?:founded by|co-founder|CEO|CTO|founder)\s*(?::\s*)?([A-Z][a-zA-Z\s,&]+)", re.IGNORECASE
)
OWNER_NAME_RUN = re.compile(r"[a-zA-Z\s]+", re.IGNORECASE)
OWNER_TITLE = re.compile(r"(?=CEO|CTO|founder|co-founder|president)", re.IGNORECASE)
CLOSING_PAREN = re.compile(r"\)")
MAX_OWNERS = 3

# JS-style digits: [0-9] only, never other Unicode decimals
AGE_PATTERN = re.compile(r"(?<![0-9])([0-9]+)\s*years?\s*(?:old|in business|in operation)", re.IGNORECASE)
YEAR_PATTERNS: List[re.Pattern] = [
    re.compile(r"founded in\s*([0-9]{4})", re.IGNORECASE),
    re.compile(r"established\s*([0-9]{4})", re.IGNORECASE),
    re.compile(r"since\s*([0-9]{4})", re.IGNORECASE),
]
MIN_FOUNDING_YEAR = 1900
MAX_FOUNDING_YEAR = 2030

# (keywords, industry, activities), checked in priority order
INDUSTRY_BUCKETS: List[Tuple[Tuple[str, ...], Industry, str]] = [
    (("software", "tech", "ai", "development"), Industry.TECHNOLOGY,
     "Software development, technology solutions"),
    (("healthcare", "medical", "health"), Industry.HEALTHCARE,
     "Healthcare services, medical solutions"),
    (("manufacturing", "production"), Industry.MANUFACTURING,
     "Manufacturing, production services"),
    (("consulting", "advisory"), Industry.CONSULTING,
     "Consulting services, advisory"),
]
DEFAULT_ACTIVITIES = "Professional services"


def extract_with_pattern(email_content: str, reference_year: Optional[int] = None) -> ExtractedOrganization:
    """
    Extract organization fields from raw email text with regex heuristics - pure function.

    Args:
        email_content: Raw email body
        reference_year: Year used as "now" for founding-year ages.
                        Defaults to the current calendar year.

    Returns:
        ExtractedOrganization with unmatched fields left at their defaults
    """
    if reference_year is None:
        reference_year = datetime.now().year

    industry, activities = extract_industry(email_content)

    return ExtractedOrganization(
        name=extract_name(email_content),
        location=extract_location(email_content),
        owners=extract_owners(email_content),
        activities=activities,
        age=extract_age(email_content, reference_year),
        website=extract_website(email_content),
        industry=industry.value,
    )


def extract_name(email_content: str) -> str:
    """
    Return the first organization name captured, or the placeholder.

    Tried in order: a suffixed name after "from/at/with", a suffixed name
    anywhere, then the name after "from/at/with" on an "I'm ..." line.
    """
    runs = RunIndex(email_content, NAME_RUN, NAME_SUFFIX)
    name = (
        _introduced_phrase(email_content, NAME_INTRO, runs)
        or _first_suffixed_phrase(email_content, runs)
        or _self_introduced_name(email_content)
    )
    return name.strip() if name else DEFAULT_ORGANIZATION_NAME


def extract_location(email_content: str) -> str:
    runs = RunIndex(email_content, LOCATION_RUN, LOCATION_SUFFIX)
    location = _introduced_phrase(email_content, LOCATION_INTRO, runs)
    return location.strip() if location else ""


def extract_website(email_content: str) -> str:
    runs = RunIndex(email_content, DOMAIN_RUN, TOP_LEVEL_DOMAIN)
    for prefix in WEBSITE_PREFIX.finditer(email_content):
        domain_start = prefix.end(1)
        dot = runs.last_terminal(domain_start, domain_start + 1)
        if dot is not None:
            end = LETTERS.match(email_content, dot[0] + 1).end()
            return email_content[prefix.start():end]
    return ""


def extract_owners(email_content: str) -> str:
    """
    Collect leadership names from both owner pattern families.

    No deduplication: the first MAX_OWNERS captures are joined in scan order.
    """
    owners: List[str] = [
        match.group(1).strip() for match in OWNER_KEYWORD_PATTERN.finditer(email_content)
    ]
    owners.extend(name.strip() for name in _titled_names(email_content))
    return ", ".join(owners[:MAX_OWNERS])


def _introduced_phrase(text: str, intro: re.Pattern, runs: RunIndex) -> Optional[str]:
    """First "<intro> <Phrase><terminal>", the phrase running to its last terminal."""
    for match in intro.finditer(text):
        start = match.end()
        if not LETTER.match(text, start):
            continue
        terminal = runs.last_terminal(start, start + 2)
        if terminal is not None:
            return text[start:terminal[1]]
    return None


def _first_suffixed_phrase(text: str, runs: RunIndex) -> Optional[str]:
    for run_start, run_end in runs.runs:
        letter = LETTER.search(text, run_start, run_end)
        if letter is None:
            continue
        # Later starts in the same run see a subset of its terminals
        terminal = runs.last_terminal(letter.start(), letter.start() + 2)
        if terminal is not None:
            return text[letter.start():terminal[1]]
    return None


def _self_introduced_name(text: str) -> Optional[str]:
    line_end = -1
    for intro in SELF_INTRO.finditer(text):
        # Only the first introduction on a line can match
        if intro.start() < line_end:
            continue
        match = SELF_INTRO_NAME.match(text, intro.end())
        if match:
            return match.group(1)
        line_end = text.find("\n", intro.end())
        if line_end == -1:
            return None
    return None


def _titled_names(text: str) -> List[str]:
    """Names directly followed by a parenthetical that holds a leadership title."""
    closing = positions(CLOSING_PAREN, text)
    titles = positions(OWNER_TITLE, text)
    names: List[str] = []
    resume_at = 0
    for run_start, run_end in (match.span() for match in OWNER_NAME_RUN.finditer(text)):
        if run_start < resume_at or text[run_end:run_end + 1] != "(":
            continue
        letter = LETTER.search(text, run_start, run_end)
        if letter is None or run_end - letter.start() < 2:
            continue
        close_at = first_after(closing, run_end)
        title_at = first_after(titles, run_end)
        if close_at is None or title_at is None or title_at >= close_at:
            continue
        names.append(text[letter.start():run_end])
        resume_at = close_at + 1
    return names


def extract_age(email_content: str, reference_year: int) -> int:
    """
    Return the organization age in years, or 0 when nothing matches.

    An explicit "N years old/in business/in operation" wins over any founding
    year. A founding year inside (MIN_FOUNDING_YEAR, MAX_FOUNDING_YEAR) is
    subtracted from reference_year; a capture below 100 is already an age.
    """
    match = AGE_PATTERN.search(email_content)
    if match:
        return int(match.group(1))

    for pattern in YEAR_PATTERNS:
        match = pattern.search(email_content)
        if not match:
            continue
        year = int(match.group(1))
        if MIN_FOUNDING_YEAR < year < MAX_FOUNDING_YEAR:
            return max(reference_year - year, 0)
        if year < 100:
            return year
        return 0

    return 0


def extract_industry(email_content: str) -> Tuple[Industry, str]:
    """Return (industry, activities) for the first bucket whose keyword appears."""
    text = email_content.lower()
    for keywords, industry, activities in INDUSTRY_BUCKETS:
        if any(keyword in text for keyword in keywords):
            return industry, activities
    return Industry.BUSINESS_SERVICES, DEFAULT_ACTIVITIES
